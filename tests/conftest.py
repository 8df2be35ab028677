"""Shared fixtures over the Alice/Bob/Carl/Amy history in factories.py."""

import pytest

from libs.csgo_stats.config import StatsConfig
from libs.csgo_stats.service import StatsService

from factories import ALICE, AMY, BOB, CARL, TODAY, FakeStatsStore, history


@pytest.fixture
def store():
    return FakeStatsStore(players=[ALICE, BOB, CARL, AMY], matches=history())


@pytest.fixture
def stats_config():
    config = StatsConfig()
    config.leaderboard_size = 100
    config.streak_length = 10
    config.matches_page_size = 10
    config.built_profiles_limit = 8
    config.cache_maxsize = 1000
    config.min_search_length = 2
    return config


@pytest.fixture
def make_service(store, stats_config):
    """Build a StatsService over the shared store."""
    def _make_service(**overrides):
        return StatsService(
            overrides.pop("store", store),
            config=overrides.pop("config", stats_config),
            today=lambda: TODAY,
            **overrides,
        )
    return _make_service
