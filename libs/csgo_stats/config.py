"""
Stats engine configuration from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from libs.csgo_stats.cache import DEFAULT_CACHE_MAXSIZE
from libs.csgo_stats.leaderboard import DEFAULT_LEADERBOARD_SIZE
from libs.csgo_stats.streaks import DEFAULT_STREAK_LENGTH

LIBS_DIR = Path(__file__).parent.parent
ROOT_DIR = LIBS_DIR.parent
ENV_FILE = ROOT_DIR / ".env"

if ENV_FILE.exists():
    load_dotenv(dotenv_path=ENV_FILE, override=False)


class StatsConfig:
    """Limits and sizes used by the stats service."""

    def __init__(self) -> None:
        self.leaderboard_size: int = int(os.getenv("CSGO_LEADERBOARD_SIZE", str(DEFAULT_LEADERBOARD_SIZE)))
        self.streak_length: int = int(os.getenv("CSGO_STREAK_LENGTH", str(DEFAULT_STREAK_LENGTH)))
        self.matches_page_size: int = int(os.getenv("CSGO_MATCHES_PAGE_SIZE", "10"))
        self.built_profiles_limit: int = int(os.getenv("CSGO_BUILT_PROFILES_LIMIT", "8"))
        # Per cache kind; entries past this are evicted one at a time, least recently used first
        self.cache_maxsize: int = int(os.getenv("CSGO_CACHE_MAXSIZE", str(DEFAULT_CACHE_MAXSIZE)))
        self.min_search_length: int = int(os.getenv("CSGO_MIN_SEARCH_LENGTH", "2"))

    def __repr__(self) -> str:
        return (
            f"StatsConfig("
            f"leaderboard_size={self.leaderboard_size}, "
            f"streak_length={self.streak_length}, "
            f"matches_page_size={self.matches_page_size}, "
            f"built_profiles_limit={self.built_profiles_limit}, "
            f"cache_maxsize={self.cache_maxsize}, "
            f"min_search_length={self.min_search_length})"
        )


_stats_config: Optional[StatsConfig] = None


def get_stats_config() -> StatsConfig:
    """Get or create the singleton config instance."""
    global _stats_config
    if _stats_config is None:
        _stats_config = StatsConfig()
    return _stats_config
