"""
Discord bot entry point with the /csgo slash commands.

The bot owns the stats service for its whole lifetime: the pool and the
caches are created in setup_hook and closed only when the bot shuts down,
so a Discord reconnect keeps every cached profile.
"""

import logging
import os
import signal

from typing import Optional

import discord

from discord.ext import commands

from apps.discord_stats_bot.bot_config import DiscordBotConfig, get_bot_config
from apps.discord_stats_bot.commands import setup_csgo_command
from apps.discord_stats_bot.common import close_stats_service, initialize_stats_service
from apps.discord_stats_bot.health_check import READINESS_FILE

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _mark_ready() -> None:
    try:
        open(READINESS_FILE, "a").close()
        logger.info(f"Readiness file {READINESS_FILE} created")
    except OSError as e:
        logger.warning(f"Could not create readiness file: {e}")


def _mark_not_ready() -> None:
    try:
        os.remove(READINESS_FILE)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove readiness file: {e}")


class StatsBot(commands.Bot):
    """Slash-command-only bot serving CSGO stats from one shared StatsService."""

    def __init__(self, config: DiscordBotConfig) -> None:
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=discord.Intents.default(),
            description="CSGO Stats Discord Bot",
        )
        self.config = config
        setup_csgo_command(self.tree, self.is_allowed_channel)

    def is_allowed_channel(self, interaction: discord.Interaction) -> bool:
        """Commands run anywhere unless an allow-list of channels is configured."""
        allowed = self.config.allowed_channel_ids
        return not allowed or interaction.channel_id in allowed

    async def setup_hook(self) -> None:
        logger.info("Initializing stats service before connecting to Discord")
        await initialize_stats_service()

    async def on_ready(self) -> None:
        logger.info(f"Logged in as {self.user}, member of {len(self.guilds)} guild(s)")
        await self._sync_commands()
        await self.change_presence(activity=discord.Game(name="/csgo profile"))
        _mark_ready()

    async def on_disconnect(self) -> None:
        logger.info("Disconnected from Discord")
        _mark_not_ready()

    async def close(self) -> None:
        _mark_not_ready()
        await close_stats_service()
        await super().close()

    async def _sync_commands(self) -> None:
        dev_guild_id: Optional[int] = self.config.dev_guild_id
        try:
            if dev_guild_id:
                # Guild sync is immediate, global sync can take up to an hour
                guild = discord.Object(id=dev_guild_id)
                self.tree.clear_commands(guild=guild)
                self.tree.copy_global_to(guild=guild)
                synced = await self.tree.sync(guild=guild)
                scope = f"guild {dev_guild_id}"
            else:
                synced = await self.tree.sync()
                scope = "all guilds"
        except discord.HTTPException as e:
            logger.warning(f"HTTP error while syncing commands: {e}", exc_info=True)
            return

        logger.info(f"Synced {len(synced)} commands to {scope}: {', '.join(cmd.name for cmd in synced)}")


def create_bot(config: Optional[DiscordBotConfig] = None) -> StatsBot:
    return StatsBot(config or get_bot_config())


def main():
    """Run the bot until it is stopped by a signal or fails to start."""
    config = get_bot_config()
    bot = create_bot(config)

    def handle_shutdown_signal(signum: int, frame) -> None:
        logger.info(f"Received signal {signum}, shutting down")
        _mark_not_ready()
        raise SystemExit(0)

    for sig in (signal.SIGTERM, signal.SIGINT):
        signal.signal(sig, handle_shutdown_signal)

    try:
        bot.run(config.token, log_handler=None)
    except Exception as e:
        logger.error(f"Bot stopped with an error: {e}", exc_info=True)
        _mark_not_ready()
        raise


if __name__ == "__main__":
    main()
