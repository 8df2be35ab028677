"""Tests for StatsService over an in-memory store."""

import asyncio
from datetime import datetime

import pytest

from libs.csgo_stats.cache import CacheKind
from libs.csgo_stats.errors import InvalidInputError, NotFoundError
from libs.csgo_stats.models import HighestValue, Side, StatField
from libs.csgo_stats.service import StatsService

from factories import ALICE, AMY, BOB, CARL, TODAY, FakeStatsStore, make_match, make_stat_line


def run(coro):
    return asyncio.run(coro)


class TestGetProfile:
    """Profile assembly, caching and lookup failures."""

    def test_three_match_profile(self, make_service):
        async def scenario():
            return await make_service().get_profile(ALICE.id)

        profile = run(scenario())

        assert profile.name == "Alice"
        assert profile.matches_played == 3
        assert (profile.won, profile.lost, profile.tied) == (1, 1, 1)
        assert round(profile.averages[StatField.SCORE].mean, 3) == 11.667
        assert profile.highest[StatField.SCORE] == HighestValue(value=20, match_id=2)
        assert profile.best_streak is None

    def test_map_statistics_on_profile(self, make_service):
        async def scenario():
            return await make_service().get_profile(ALICE.id)

        profile = run(scenario())

        assert [(m.name, m.times_played) for m in profile.map_stats] == [("de_mirage", 2), ("de_dust2", 1)]
        assert profile.map_stats[0].average_match_duration == 2200

    def test_activity_calendar_runs_until_today(self, make_service):
        async def scenario():
            return await make_service().get_profile(ALICE.id)

        calendar = run(scenario()).activity_calendar

        assert len(calendar) == (TODAY - calendar[0].day).days + 1 == 20
        assert calendar[-1].day == TODAY
        assert sum(entry.matches for entry in calendar) == 3

    def test_profile_is_cached(self, make_service, store):
        async def scenario():
            service = make_service()
            first = await service.get_profile(ALICE.id)
            second = await service.get_profile(ALICE.id)
            return first, second

        first, second = run(scenario())

        assert first is second
        assert store.calls["get_player_match_stat_lines"] == 1

    def test_player_without_matches(self, make_service):
        async def scenario():
            return await make_service().get_profile(AMY.id)

        profile = run(scenario())

        assert profile.matches_played == 0
        assert profile.averages == {}
        assert profile.highest == {}
        assert profile.best_streak is None
        assert profile.activity_calendar == ()

    def test_returned_profile_cannot_be_altered(self, make_service):
        async def scenario():
            service = make_service()
            first = await service.get_profile(ALICE.id)
            with pytest.raises(AttributeError):
                first.averages.clear()
            with pytest.raises(TypeError):
                del first.highest[StatField.SCORE]
            return await service.get_profile(ALICE.id)

        profile = run(scenario())

        assert len(profile.averages) == len(StatField)
        assert profile.highest[StatField.SCORE] == HighestValue(value=20, match_id=2)

    def test_match_after_today_is_rejected(self, store, make_service):
        store._add(make_match(9, datetime(2024, 2, 1, 12, 0), [
            (ALICE, make_stat_line(ALICE.id, 9)),
        ]))

        async def scenario():
            service = make_service()
            with pytest.raises(InvalidInputError):
                await service.get_profile(ALICE.id)
            return await service.cache.size(CacheKind.PROFILE)

        assert run(scenario()) == 0

    def test_unknown_player(self, make_service):
        async def scenario():
            await make_service().get_profile("nobody")

        with pytest.raises(NotFoundError) as exc_info:
            run(scenario())

        assert exc_info.value.key == "nobody"

    def test_profile_by_link_ignores_trailing_slash(self, make_service):
        async def scenario():
            return await make_service().get_profile_by_link(BOB.steam_link + "/")

        assert run(scenario()).id == BOB.id

    def test_unknown_link(self, make_service):
        async def scenario():
            await make_service().get_profile_by_link("https://steamcommunity.com/id/ghost")

        with pytest.raises(NotFoundError):
            run(scenario())

    def test_stale_profile_not_cached_across_invalidation(self, store, stats_config):
        class InvalidatingStore(FakeStatsStore):
            service = None

            async def get_player_match_stat_lines(self, player_id):
                games = await super().get_player_match_stat_lines(player_id)
                await self.service.notify_new_match_data()
                return games

        async def scenario():
            racing_store = InvalidatingStore(players=store.players.values(), matches=store.matches.values())
            service = StatsService(racing_store, config=stats_config, today=lambda: TODAY)
            racing_store.service = service

            profile = await service.get_profile(ALICE.id)
            return profile, await service.cache.size(CacheKind.PROFILE)

        profile, cached_profiles = run(scenario())

        assert profile.matches_played == 3
        assert cached_profiles == 0


class TestBuiltProfiles:

    def test_most_matches_first(self, make_service):
        async def scenario():
            service = make_service()
            for player in (CARL, ALICE, BOB):
                await service.get_profile(player.id)
            return await service.get_built_profiles()

        built = run(scenario())

        assert [(p.name, p.matches_count) for p in built] == [("Alice", 3), ("Bob", 2), ("Carl", 1)]

    def test_limit(self, make_service):
        async def scenario():
            service = make_service()
            for player in (ALICE, BOB, CARL):
                await service.get_profile(player.id)
            return await service.get_built_profiles(limit=1)

        assert [p.id for p in run(scenario())] == [ALICE.id]

    def test_nothing_built_yet(self, make_service):
        async def scenario():
            return await make_service().get_built_profiles()

        assert run(scenario()) == []


class TestSearch:
    """Case-insensitive prefix search over player names."""

    def test_single_letter_returns_nothing_by_default(self, make_service):
        async def scenario():
            return await make_service().search("a")

        assert run(scenario()) == []

    def test_single_letter_with_minimum_of_one(self, make_service, stats_config):
        stats_config.min_search_length = 1

        async def scenario():
            return await make_service().search("a")

        assert [p.name for p in run(scenario())] == ["Alice", "Amy"]

    def test_case_insensitive_prefix(self, make_service):
        async def scenario():
            return await make_service().search("AM")

        assert [p.name for p in run(scenario())] == ["Amy"]

    def test_no_match(self, make_service):
        async def scenario():
            return await make_service().search("zz")

        assert run(scenario()) == []


class TestPlayerStatistics:

    def test_most_recent_first(self, make_service):
        async def scenario():
            return await make_service().get_player_statistics(ALICE.id, StatField.KILLS)

        assert run(scenario()) == [33, 22, 11]

    def test_field_by_name(self, make_service):
        async def scenario():
            return await make_service().get_player_statistics(ALICE.id, "Score")

        assert run(scenario()) == [5, 20, 10]

    def test_match_level_field(self, make_service):
        async def scenario():
            return await make_service().get_player_statistics(ALICE.id, "wait_time")

        assert run(scenario()) == [60, 100, 40]

    def test_solo_queue_only(self, make_service):
        # Match 3 repeats Bob from match 1
        async def scenario():
            return await make_service().get_player_statistics(ALICE.id, StatField.KILLS, solo_queue_only=True)

        assert run(scenario()) == [22, 11]

    def test_unknown_field(self, make_service):
        async def scenario():
            await make_service().get_player_statistics(ALICE.id, "headshots")

        with pytest.raises(InvalidInputError):
            run(scenario())

    def test_unknown_player(self, make_service):
        async def scenario():
            await make_service().get_player_statistics("nobody", StatField.KILLS)

        with pytest.raises(NotFoundError):
            run(scenario())


class TestSoloQueueMatches:

    def test_classification_is_cached(self, make_service, store):
        async def scenario():
            service = make_service()
            first = await service.get_solo_queue_matches(ALICE.id)
            second = await service.get_solo_queue_matches(ALICE.id)
            return first, second

        first, second = run(scenario())

        assert first == second == {1, 2}
        assert store.calls["get_player_match_ids"] == 1

    def test_unknown_player(self, make_service):
        async def scenario():
            service = make_service()
            with pytest.raises(NotFoundError):
                await service.get_solo_queue_matches("nobody")
            return await service.cache.size(CacheKind.SOLO_QUEUE)

        assert run(scenario()) == 0


class TestPlayerMatches:

    def test_first_page(self, make_service):
        async def scenario():
            return await make_service().get_player_matches(ALICE.id)

        assert [game.match_id for game in run(scenario())] == [1, 2, 3]

    def test_page_past_the_end(self, make_service):
        async def scenario():
            return await make_service().get_player_matches(ALICE.id, page=1)

        assert run(scenario()) == []

    def test_page_size(self, make_service, stats_config):
        stats_config.matches_page_size = 2

        async def scenario():
            service = make_service()
            return await service.get_player_matches(ALICE.id, 0), await service.get_player_matches(ALICE.id, 1)

        first, second = run(scenario())

        assert [g.match_id for g in first] == [1, 2]
        assert [g.match_id for g in second] == [3]

    def test_negative_page(self, make_service):
        async def scenario():
            await make_service().get_player_matches(ALICE.id, page=-1)

        with pytest.raises(InvalidInputError):
            run(scenario())


class TestMatchAndLeaderboard:

    def test_get_match(self, make_service, store):
        async def scenario():
            service = make_service()
            await service.get_match(2)
            return await service.get_match(2)

        match = run(scenario())

        assert match.map_name == "de_dust2"
        assert {p.player_id for p in match.players} == {ALICE.id, CARL.id}
        assert store.calls["get_match"] == 1

    def test_unknown_match(self, make_service):
        async def scenario():
            await make_service().get_match(999)

        with pytest.raises(NotFoundError):
            run(scenario())

    def test_leaderboard_ranks_stat_lines(self, make_service):
        async def scenario():
            return await make_service().get_leaderboard()

        board = run(scenario())

        assert [(e.rank, e.player.name, e.stats.score) for e in board] == [
            (1, "Bob", 30),
            (2, "Alice", 20),
            (3, "Bob", 15),
            (4, "Alice", 10),
            (5, "Carl", 8),
            (6, "Alice", 5),
        ]

    def test_leaderboard_is_cached(self, make_service, store):
        async def scenario():
            service = make_service()
            return await service.get_leaderboard(), await service.get_leaderboard()

        first, second = run(scenario())

        assert first is second
        assert store.calls["get_all_players_with_stats"] == 1


class TestInvalidation:
    """New match data is visible on the next read."""

    @staticmethod
    def fourth_match():
        return make_match(4, datetime(2024, 1, 10, 20, 0), [
            (ALICE, make_stat_line(ALICE.id, 4, score=50, kills=40, side=Side.T)),
            (AMY, make_stat_line(AMY.id, 4, score=12, side=Side.CT)),
        ], winner=Side.T)

    def test_profile_and_leaderboard_reflect_new_match(self, make_service):
        async def scenario():
            service = make_service()
            before = await service.get_profile(ALICE.id)
            await service.get_leaderboard()

            inserted = await service.add_matches([self.fourth_match()])
            after = await service.get_profile(ALICE.id)
            board = await service.get_leaderboard()
            return before, inserted, after, board

        before, inserted, after, board = run(scenario())

        assert before.matches_played == 3
        assert inserted == 1
        assert after.matches_played == 4
        assert after.won == 2
        assert after.highest[StatField.SCORE] == HighestValue(value=50, match_id=4)
        assert board[0].stats.score == 50

    def test_notify_clears_every_cache(self, make_service):
        async def scenario():
            service = make_service()
            await service.get_profile(ALICE.id)
            await service.get_solo_queue_matches(ALICE.id)
            await service.get_leaderboard()

            await service.notify_new_match_data()
            return [await service.cache.size(kind) for kind in CacheKind]

        assert run(scenario()) == [0] * len(CacheKind)

    def test_duplicate_matches_keep_caches(self, make_service, store):
        async def scenario():
            service = make_service()
            await service.get_profile(ALICE.id)
            inserted = await service.add_matches(list(store.matches.values()))
            await service.get_profile(ALICE.id)
            return inserted, service.cache.generation

        inserted, generation = run(scenario())

        assert inserted == 0
        assert generation == 0
        assert store.calls["get_player_match_stat_lines"] == 1

    def test_standalone_aggregates_after_invalidation(self, make_service):
        async def scenario():
            service = make_service()
            maps_before = await service.get_player_map_statistics(ALICE.id)
            await service.add_matches([self.fourth_match()])
            maps_after = await service.get_player_map_statistics(ALICE.id)
            calendar = await service.get_player_match_frequency(ALICE.id)
            return maps_before, maps_after, calendar

        maps_before, maps_after, calendar = run(scenario())

        assert sum(m.times_played for m in maps_before) == 3
        assert sum(m.times_played for m in maps_after) == 4
        assert sum(entry.matches for entry in calendar) == 4
