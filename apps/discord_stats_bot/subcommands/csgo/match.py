"""
CSGO match subcommand - Scoreboard of a single match.
"""

import logging

import discord
from discord import app_commands

from apps.discord_stats_bot.common import build_match_message, command_wrapper, get_stats_service

logger = logging.getLogger(__name__)


def register_match_subcommand(csgo_group: app_commands.Group, channel_check=None) -> None:
    """Register the match subcommand with the csgo group."""
    @csgo_group.command(name="match", description="Show the scoreboard of a match")
    @app_commands.describe(match_id="The match ID")
    @command_wrapper("csgo match", channel_check=channel_check)
    async def csgo_match(interaction: discord.Interaction, match_id: int):
        """Show a match scoreboard."""
        match = await get_stats_service().get_match(match_id)
        await interaction.followup.send(build_match_message(match))
