"""
PostgreSQL configuration for the CSGO stats database, from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LIBS_DIR = Path(__file__).parent.parent
ROOT_DIR = LIBS_DIR.parent
ENV_FILE = ROOT_DIR / ".env"

if ENV_FILE.exists():
    load_dotenv(dotenv_path=ENV_FILE, override=False)


class DatabaseConfig:
    """PostgreSQL connection settings from environment variables."""
    
    def __init__(self) -> None:
        self.host: Optional[str] = os.getenv("POSTGRES_HOST")
        self.port: int = int(os.getenv("POSTGRES_PORT", "5432"))
        self.database: Optional[str] = os.getenv("POSTGRES_DB")
        self.user: Optional[str] = os.getenv("POSTGRES_USER")
        self.password: Optional[str] = os.getenv("POSTGRES_PASSWORD")
    
    @property
    def missing(self) -> list[str]:
        """Names of required variables that are not set."""
        required = {
            "POSTGRES_HOST": self.host,
            "POSTGRES_DB": self.database,
            "POSTGRES_USER": self.user,
        }
        return [name for name, value in required.items() if not value]
    
    def __repr__(self) -> str:
        return (
            f"DatabaseConfig(host={self.host!r}, port={self.port}, "
            f"database={self.database!r}, user={self.user!r}, password=***)"
        )


_db_config: Optional[DatabaseConfig] = None


def get_db_config() -> DatabaseConfig:
    """Get or create the singleton config instance."""
    global _db_config
    if _db_config is None:
        _db_config = DatabaseConfig()
    return _db_config
