"""
Commands module for Discord bot.

Contains the /csgo command group.
"""

from apps.discord_stats_bot.commands.csgo import setup_csgo_command

__all__ = [
    'setup_csgo_command',
]
