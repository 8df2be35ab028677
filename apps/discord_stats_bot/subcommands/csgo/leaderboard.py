"""
CSGO leaderboard subcommand - Best single-match scores across all players.
"""

import logging

import discord
from discord import app_commands

from apps.discord_stats_bot.common import (
    build_leaderboard_message,
    command_wrapper,
    get_stats_service,
)
from apps.discord_stats_bot.common.constants import LEADERBOARD_DISPLAY_LIMIT

logger = logging.getLogger(__name__)


def register_leaderboard_subcommand(csgo_group: app_commands.Group, channel_check=None) -> None:
    """Register the leaderboard subcommand with the csgo group."""
    @csgo_group.command(name="leaderboard", description="Show the best single-match scores")
    @command_wrapper("csgo leaderboard", channel_check=channel_check)
    async def csgo_leaderboard(interaction: discord.Interaction):
        """Show the leaderboard."""
        entries = await get_stats_service().get_leaderboard()
        await interaction.followup.send(build_leaderboard_message(entries, LEADERBOARD_DISPLAY_LIMIT))
