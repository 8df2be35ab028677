"""
PostgreSQL connection pool for the stats store, using asyncpg.
"""

from __future__ import annotations

import logging

from typing import Optional

import asyncpg

from libs.db.config import DatabaseConfig, get_db_config

logger = logging.getLogger(__name__)


async def _setup_connection(conn: asyncpg.Connection) -> None:
    """Set up connection defaults."""
    await conn.execute("SET statement_timeout = '60s'")


async def create_db_pool(
    config: Optional[DatabaseConfig] = None,
    min_size: int = 2,
    max_size: int = 10,
) -> asyncpg.Pool:
    """Create an asyncpg connection pool from the environment config (or the one given)."""
    config = config or get_db_config()
    
    if config.missing:
        raise ValueError(f"Missing database config: {', '.join(config.missing)}")
    
    logger.info(f"Creating connection pool for PostgreSQL at {config.host}:{config.port}/{config.database}...")
    
    try:
        pool = await asyncpg.create_pool(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.user,
            password=config.password,
            min_size=min_size,
            max_size=max_size,
            command_timeout=60,
            max_inactive_connection_lifetime=300,
            setup=_setup_connection,
        )
    except (asyncpg.PostgresError, OSError) as e:
        raise ConnectionError(f"Failed to create database connection pool: {e}") from e
    
    logger.info("Created database connection pool")
    return pool


async def check_connection(pool: asyncpg.Pool) -> bool:
    """Return True if the pool can run a trivial query."""
    try:
        async with pool.acquire() as conn:
            return await conn.fetchval("SELECT 1") == 1
    except (asyncpg.PostgresError, OSError) as e:
        logger.warning(f"Database check failed: {e}")
        return False
