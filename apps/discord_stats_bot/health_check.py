"""
Minimal health check for the CSGO stats Discord bot.

Verifies:
1. Bot is connected to Discord (readiness file exists)
2. Stats database is reachable (can execute a simple query)

The bot creates READINESS_FILE in on_ready and removes it on disconnect.
This script exits 0 if healthy, 1 otherwise.
"""

from __future__ import annotations

import asyncio
import os
import sys

import asyncpg

from libs.db.config import get_db_config

READINESS_FILE = os.getenv("DISCORD_BOT_READINESS_FILE", "/tmp/csgo-stats-bot-ready")


async def check_database() -> bool:
    """Check if database connection is working."""
    config = get_db_config()
    if config.missing:
        return False
    
    try:
        conn = await asyncpg.connect(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.user,
            password=config.password,
            timeout=5,
        )
    except (asyncpg.PostgresError, OSError, asyncio.TimeoutError):
        return False
    
    try:
        return await conn.fetchval("SELECT 1") == 1
    except asyncpg.PostgresError:
        return False
    finally:
        await conn.close()


async def is_healthy() -> bool:
    """Return True only when bot is connected AND database is reachable."""
    if not os.path.isfile(READINESS_FILE):
        return False
    return await check_database()


def main() -> int:
    return 0 if asyncio.run(is_healthy()) else 1


if __name__ == "__main__":
    sys.exit(main())
