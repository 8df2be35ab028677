"""
Command logging utilities for Discord bot.
"""

import logging
import time
from typing import Optional

import discord

logger = logging.getLogger(__name__)

# Keys that are passed around internally and never worth logging
_INTERNAL_KEYS = ('command_start_time', 'interaction')


def _describe_user(user: discord.abc.User) -> str:
    return f"{user.name} ({user.id})"


def _format_params(params: Optional[dict]) -> str:
    if not params:
        return ""
    shown = {k: v for k, v in params.items() if v is not None and k not in _INTERNAL_KEYS}
    if not shown:
        return ""
    return " | Params: " + ", ".join(f"{k}={v}" for k, v in shown.items())


def log_command_data(interaction: discord.Interaction, command_name: str, **kwargs) -> None:
    """Log command invocation with user, channel, and parameters."""
    channel_name = getattr(interaction.channel, "name", None) or "DM"
    channel_info = f"#{channel_name} ({interaction.channel_id})"
    
    logger.info(
        f"Command: {command_name} | User: {_describe_user(interaction.user)} | "
        f"Channel: {channel_info}{_format_params(kwargs)}"
    )


def get_command_latency_ms(start_time: float) -> float:
    """Calculate elapsed time in milliseconds since start_time."""
    return (time.time() - start_time) * 1000


def log_command_completion(
    command_name: str,
    start_time: float,
    success: bool = True,
    interaction: Optional[discord.Interaction] = None,
    kwargs: Optional[dict] = None
) -> None:
    """Log command completion status with latency and user info."""
    status = "SUCCESS" if success else "FAILED"
    latency_ms = get_command_latency_ms(start_time)
    
    user_info = ""
    if interaction and interaction.user:
        user_info = f" | User: {_describe_user(interaction.user)}"
    
    logger.info(
        f"Command: {command_name} | Status: {status} | Latency: {latency_ms:.2f}ms"
        f"{user_info}{_format_params(kwargs)}"
    )
