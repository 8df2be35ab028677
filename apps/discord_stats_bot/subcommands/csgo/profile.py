"""
CSGO profile subcommand - Show a player's averages, personal bests and record.
"""

import logging

import discord
from discord import app_commands

from apps.discord_stats_bot.common import (
    build_profile_message,
    command_wrapper,
    find_player,
    get_stats_service,
)

logger = logging.getLogger(__name__)


def register_profile_subcommand(csgo_group: app_commands.Group, channel_check=None) -> None:
    """
    Register the profile subcommand with the csgo group.
    
    Args:
        csgo_group: The csgo command group to register the subcommand with
        channel_check: Optional function to check if the channel is allowed
    """
    @csgo_group.command(name="profile", description="Show a player's averages, personal bests and win/loss record")
    @app_commands.describe(player="Steam profile link, player ID or player name")
    @command_wrapper("csgo profile", channel_check=channel_check)
    async def csgo_profile(interaction: discord.Interaction, player: str):
        """Show a player's profile."""
        service = get_stats_service()
        found = await find_player(service, player)
        profile = await service.get_profile(found.id)
        
        await interaction.followup.send(build_profile_message(profile))
