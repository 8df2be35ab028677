"""
CSGO search subcommand - Find players by name prefix.
"""

import logging

import discord
from discord import app_commands

from apps.discord_stats_bot.common import command_wrapper, get_stats_service
from apps.discord_stats_bot.common.constants import SEARCH_DISPLAY_LIMIT

logger = logging.getLogger(__name__)


def register_search_subcommand(csgo_group: app_commands.Group, channel_check=None) -> None:
    """Register the search subcommand with the csgo group."""
    @csgo_group.command(name="search", description="Find players whose name starts with the given text")
    @app_commands.describe(name="Start of the player name (at least 2 characters)")
    @command_wrapper("csgo search", channel_check=channel_check)
    async def csgo_search(interaction: discord.Interaction, name: str):
        """Find players by name prefix."""
        players = await get_stats_service().search(name.strip())
        
        if not players:
            await interaction.followup.send(f"❌ No players found starting with `{name}`.")
            return
        
        lines = [f"## Players matching `{name}`"]
        lines.extend(f"- {p.name} (`{p.id}`)" for p in players[:SEARCH_DISPLAY_LIMIT])
        if len(players) > SEARCH_DISPLAY_LIMIT:
            lines.append(f"*...and {len(players) - SEARCH_DISPLAY_LIMIT} more*")
        
        await interaction.followup.send("\n".join(lines))
