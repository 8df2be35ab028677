"""
CSGO stats subcommand - A player's recent values for one statistic.
"""

import logging

import discord
from discord import app_commands

from apps.discord_stats_bot.common import command_wrapper, find_player, get_stats_service
from apps.discord_stats_bot.common.constants import (
    STAT_FIELD_CHOICES,
    STAT_FIELD_DISPLAY_NAMES,
    STATISTICS_DISPLAY_LIMIT,
)
from libs.csgo_stats import StatField
from libs.csgo_stats.statistics import summarize

logger = logging.getLogger(__name__)


def register_stats_subcommand(csgo_group: app_commands.Group, channel_check=None) -> None:
    """Register the stats subcommand with the csgo group."""
    @csgo_group.command(name="stats", description="Show a player's most recent values for one statistic")
    @app_commands.describe(
        player="Steam profile link, player ID or player name",
        stat="The statistic to show",
        solo_queue_only="(Optional) Only count matches without previously seen co-players (default: false)"
    )
    @app_commands.choices(stat=STAT_FIELD_CHOICES)
    @command_wrapper("csgo stats", channel_check=channel_check)
    async def csgo_stats(interaction: discord.Interaction, player: str, stat: str, solo_queue_only: bool = False):
        """Show recent values of one stat."""
        service = get_stats_service()
        field = StatField.parse(stat)
        found = await find_player(service, player)
        values = await service.get_player_statistics(found.id, field, solo_queue_only)
        
        scope = "solo-queue matches" if solo_queue_only else "matches"
        display_name = STAT_FIELD_DISPLAY_NAMES[field]
        if not values:
            await interaction.followup.send(f"❌ No {scope} found for `{found.name}`.")
            return
        
        summary = summarize(values)
        recent = ", ".join(f"{value:g}" for value in values[:STATISTICS_DISPLAY_LIMIT])
        await interaction.followup.send(
            f"## {display_name} - {found.name}\n"
            f"**Average over {len(values)} {scope}:** {summary.mean:.2f} "
            f"(± {summary.standard_error:.2f})\n"
            f"**Most recent first:** {recent}"
        )
