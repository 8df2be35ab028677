"""
CSGO match-statistics aggregation and caching engine.

This package turns raw per-match player records into cached profiles,
statistics, activity calendars, solo-queue classifications and a global
leaderboard. Bot commands and API routes use StatsService.
"""

from libs.csgo_stats.cache import CacheKind, StatsCache
from libs.csgo_stats.config import StatsConfig, get_stats_config
from libs.csgo_stats.errors import (
    InsufficientDataError,
    InvalidInputError,
    NotFoundError,
    StatsError,
)
from libs.csgo_stats.models import (
    ActivityCalendarEntry,
    BuiltProfile,
    HighestValue,
    LeaderboardEntry,
    MapStatistic,
    MatchParticipant,
    MatchRecord,
    PlayerGame,
    PlayerMatchStatLine,
    PlayerRecord,
    PlayerStatRow,
    Profile,
    Side,
    StatField,
    StatSummary,
)
from libs.csgo_stats.service import StatsService
from libs.csgo_stats.store import PostgresStatsStore, StatsStore

__all__ = [
    'ActivityCalendarEntry',
    'BuiltProfile',
    'CacheKind',
    'HighestValue',
    'InsufficientDataError',
    'InvalidInputError',
    'LeaderboardEntry',
    'MapStatistic',
    'MatchParticipant',
    'MatchRecord',
    'NotFoundError',
    'PlayerGame',
    'PlayerMatchStatLine',
    'PlayerRecord',
    'PlayerStatRow',
    'PostgresStatsStore',
    'Profile',
    'Side',
    'StatField',
    'StatSummary',
    'StatsCache',
    'StatsConfig',
    'StatsError',
    'StatsService',
    'StatsStore',
    'get_stats_config',
]
