"""
CSGO refresh subcommand - Drop all cached stats after new matches were imported.
"""

import logging

import discord
from discord import app_commands

from apps.discord_stats_bot.bot_config import get_bot_config
from apps.discord_stats_bot.common import command_wrapper, get_stats_service

logger = logging.getLogger(__name__)


def is_stats_admin(interaction: discord.Interaction) -> bool:
    """True if the user has a configured admin role, or Manage Server when none is configured."""
    member = interaction.user
    if not isinstance(member, discord.Member):
        return False
    
    admin_role_ids = get_bot_config().admin_role_ids
    if admin_role_ids:
        return any(role.id in admin_role_ids for role in member.roles)
    return member.guild_permissions.manage_guild


def register_refresh_subcommand(csgo_group: app_commands.Group, channel_check=None) -> None:
    """Register the refresh subcommand with the csgo group."""
    @csgo_group.command(name="refresh", description="(Admin) Rebuild cached stats after new matches were imported")
    @command_wrapper("csgo refresh", channel_check=channel_check, ephemeral=True)
    async def csgo_refresh(interaction: discord.Interaction):
        """Invalidate every stats cache."""
        if not is_stats_admin(interaction):
            await interaction.followup.send("❌ You are not allowed to refresh the stats caches.", ephemeral=True)
            return
        
        await get_stats_service().notify_new_match_data()
        logger.info(f"Stats caches invalidated by {interaction.user.name} ({interaction.user.id})")
        await interaction.followup.send("✅ Stats caches cleared. Profiles will be rebuilt on next use.", ephemeral=True)
