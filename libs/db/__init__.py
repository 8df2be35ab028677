"""
Shared database configuration and connection pool for the CSGO stats project.
"""

from libs.db.config import get_db_config, DatabaseConfig
from libs.db.database import create_db_pool, check_connection

__all__ = [
    'get_db_config',
    'DatabaseConfig',
    'create_db_pool',
    'check_connection',
]
