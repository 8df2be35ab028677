"""
CSGO subcommands module.

Provides subcommand registration for the /csgo command group.
"""

from apps.discord_stats_bot.subcommands.csgo.leaderboard import register_leaderboard_subcommand
from apps.discord_stats_bot.subcommands.csgo.match import register_match_subcommand
from apps.discord_stats_bot.subcommands.csgo.profile import register_profile_subcommand
from apps.discord_stats_bot.subcommands.csgo.refresh import register_refresh_subcommand
from apps.discord_stats_bot.subcommands.csgo.search import register_search_subcommand
from apps.discord_stats_bot.subcommands.csgo.stats import register_stats_subcommand

__all__ = [
    'register_leaderboard_subcommand',
    'register_match_subcommand',
    'register_profile_subcommand',
    'register_refresh_subcommand',
    'register_search_subcommand',
    'register_stats_subcommand',
]
