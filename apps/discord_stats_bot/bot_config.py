"""
Discord bot configuration from environment variables.
"""

from __future__ import annotations

import logging
import os

from pathlib import Path
from typing import Optional, Set

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

APPS_DIR = Path(__file__).parent.parent
ROOT_DIR = APPS_DIR.parent
ENV_FILE = ROOT_DIR / ".env"

if ENV_FILE.exists():
    load_dotenv(dotenv_path=ENV_FILE, override=False)
    logger.info(f"Loaded .env from {ENV_FILE}")
else:
    logger.info("No .env file found")


def _parse_id_set(raw: str) -> Set[int]:
    """Parse a comma-separated list of Discord snowflake IDs."""
    return {int(part.strip()) for part in raw.split(",") if part.strip()}


class DiscordBotConfig:
    """Discord bot settings loaded from environment variables."""
    
    def __init__(self) -> None:
        self.token: Optional[str] = os.getenv("DISCORD_BOT_TOKEN")
        
        if not self.token:
            raise ValueError("DISCORD_BOT_TOKEN environment variable is required")
        
        self.allowed_channel_ids: Set[int] = _parse_id_set(os.getenv("DISCORD_ALLOWED_CHANNEL_IDS", ""))
        
        dev_guild_id_str = os.getenv("DISCORD_DEV_GUILD_ID")
        self.dev_guild_id: Optional[int] = int(dev_guild_id_str) if dev_guild_id_str else None
        
        # Roles allowed to run /csgo refresh
        self.admin_role_ids: Set[int] = _parse_id_set(os.getenv("DISCORD_ADMIN_ROLE_IDS", ""))
    
    def __repr__(self) -> str:
        return (
            f"DiscordBotConfig("
            f"token=***, "
            f"allowed_channel_ids={self.allowed_channel_ids}, "
            f"dev_guild_id={self.dev_guild_id}, "
            f"admin_role_ids={self.admin_role_ids})"
        )


_bot_config: Optional[DiscordBotConfig] = None


def get_bot_config() -> DiscordBotConfig:
    """Get or create the singleton config instance."""
    global _bot_config
    if _bot_config is None:
        _bot_config = DiscordBotConfig()
    return _bot_config
