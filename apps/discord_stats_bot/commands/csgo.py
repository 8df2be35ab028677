"""
CSGO command group with subcommands for profiles, matches and the leaderboard.
"""

import logging

from discord import app_commands

from apps.discord_stats_bot.subcommands.csgo import (
    register_leaderboard_subcommand,
    register_match_subcommand,
    register_profile_subcommand,
    register_refresh_subcommand,
    register_search_subcommand,
    register_stats_subcommand,
)

logger = logging.getLogger(__name__)


def setup_csgo_command(tree: app_commands.CommandTree, channel_check=None) -> None:
    """Register the /csgo command group with all subcommands."""
    csgo_group = app_commands.Group(
        name="csgo",
        description="CSGO player profiles, statistics and leaderboard"
    )
    
    register_profile_subcommand(csgo_group, channel_check)
    register_search_subcommand(csgo_group, channel_check)
    register_stats_subcommand(csgo_group, channel_check)
    register_match_subcommand(csgo_group, channel_check)
    register_leaderboard_subcommand(csgo_group, channel_check)
    register_refresh_subcommand(csgo_group, channel_check)
    
    tree.add_command(csgo_group)
