"""
Database pool and stats service lifecycle for the Discord bot.

The bot owns exactly one StatsService (and with it one StatsCache) for the
whole process, created on startup and shared by every command.
"""

import logging

import asyncpg

from typing import Optional

from libs.csgo_stats import PostgresStatsStore, StatsService
from libs.db.database import check_connection, create_db_pool

logger = logging.getLogger(__name__)

_db_pool: Optional[asyncpg.Pool] = None
_stats_service: Optional[StatsService] = None


async def initialize_stats_service() -> StatsService:
    """
    Create the database pool and the stats service.
    This is called once from the bot's setup hook and reused afterwards.
    """
    global _db_pool, _stats_service
    
    if _stats_service is not None:
        return _stats_service
    
    _db_pool = await create_db_pool()
    if not await check_connection(_db_pool):
        logger.warning("Stats database did not answer a test query, commands may fail")
    _stats_service = StatsService(PostgresStatsStore(_db_pool))
    logger.info("Initialized stats service")
    return _stats_service


def get_stats_service() -> StatsService:
    """Return the stats service created at startup."""
    if _stats_service is None:
        raise RuntimeError("Stats service used before initialize_stats_service() was awaited")
    return _stats_service


async def close_stats_service() -> None:
    """Close the database connection pool if open."""
    global _db_pool, _stats_service
    if _db_pool is not None:
        await _db_pool.close()
        _db_pool = None
        logger.info("Closed database connection pool")
    _stats_service = None
