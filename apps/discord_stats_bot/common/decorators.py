"""
Command decorators for Discord bot.
"""

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Optional

import asyncpg
import discord

from apps.discord_stats_bot.common.logging import (
    log_command_data,
    log_command_completion,
)
from libs.csgo_stats.errors import InvalidInputError, NotFoundError, StatsError

logger = logging.getLogger(__name__)


def error_message_for(error: Exception) -> str:
    """User-facing reply for an error raised while running a command."""
    if isinstance(error, NotFoundError):
        return f"❌ {error.kind} not found: `{error.key}`"
    if isinstance(error, InvalidInputError):
        return f"❌ {error}"
    if isinstance(error, StatsError):
        return "❌ Not enough data to answer that yet."
    if isinstance(error, ConnectionError):
        return "❌ Failed to connect to the stats database. Try again later."
    if isinstance(error, asyncpg.PostgresError):
        return "❌ Database error. Try again later."
    return "❌ An unexpected error occurred."


async def handle_command_errors(
    interaction: discord.Interaction,
    command_name: str,
    start_time: float,
    error: Exception,
    use_ephemeral: bool = False,
    kwargs: Optional[dict] = None
) -> None:
    """Handle errors with appropriate logging and user-facing messages."""
    exc_info = (type(error), error, error.__traceback__)
    
    if isinstance(error, (NotFoundError, InvalidInputError)):
        logger.info(f"Rejected {command_name}: {error}")
    elif isinstance(error, StatsError):
        logger.warning(f"Stats error in {command_name}: {error}", exc_info=exc_info)
    elif isinstance(error, (ConnectionError, asyncpg.PostgresError)):
        logger.error(f"Database error in {command_name}: {error}", exc_info=exc_info)
    else:
        logger.error(f"Unexpected error in {command_name}: {error}", exc_info=exc_info)

    log_command_completion(command_name, start_time, success=False, interaction=interaction, kwargs=kwargs)

    error_msg = error_message_for(error)
    if not interaction.response.is_done():
        await interaction.response.send_message(error_msg, ephemeral=use_ephemeral)
    else:
        await interaction.followup.send(error_msg, ephemeral=use_ephemeral)


def command_wrapper(
    command_name: str,
    channel_check: Optional[Callable[[discord.Interaction], bool]] = None,
    log_params: Optional[dict] = None,
    ephemeral: bool = False,
):
    """
    Decorator that handles channel checks, logging, error handling, and response deferral.
    
    Completion is logged here for both outcomes; failures raised from the
    command are also answered here.
    
    Args:
        command_name: Name of the command for logging
        channel_check: Optional function to check if channel is allowed
        log_params: Optional additional params to log
        ephemeral: Whether replies should only be visible to the caller
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        async def wrapper(interaction: discord.Interaction, *args, **kwargs):
            command_start_time = time.time()

            log_kwargs = dict(log_params or {})
            log_kwargs.update(kwargs)
            log_command_data(interaction, command_name, **log_kwargs)

            try:
                if channel_check and not channel_check(interaction):
                    await interaction.response.send_message(
                        "❌ This bot can only be used in the designated channel.",
                        ephemeral=True
                    )
                    log_command_completion(
                        command_name, command_start_time,
                        success=False, interaction=interaction, kwargs=log_kwargs
                    )
                    return

                await interaction.response.defer(ephemeral=ephemeral)
                
                result = await func(interaction, *args, **kwargs)
                log_command_completion(
                    command_name, command_start_time,
                    success=True, interaction=interaction, kwargs=log_kwargs
                )
                return result

            except Exception as e:
                await handle_command_errors(
                    interaction, command_name, command_start_time, e,
                    use_ephemeral=ephemeral, kwargs=log_kwargs
                )
                return
        
        wrapper.__signature__ = inspect.signature(func)
        return wrapper
    return decorator
