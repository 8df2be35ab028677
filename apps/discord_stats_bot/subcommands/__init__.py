"""Subcommands for the CSGO stats Discord bot."""

from apps.discord_stats_bot.subcommands import csgo

__all__ = ['csgo']
