"""Tests for profile assembly."""

from datetime import date, datetime, timedelta

from libs.csgo_stats.models import ActivityCalendarEntry, HighestValue, MapStatistic, Side, StatField
from libs.csgo_stats.profile_builder import (
    build_profile,
    compute_averages,
    compute_highest,
    compute_map_statistics,
    count_results,
    find_best_streak,
)

from factories import make_game, make_player

START = datetime(2024, 1, 1, 20, 0)


class TestCountResults:

    def test_win_loss_tie(self):
        games = [
            make_game(1, START, side=Side.CT, winner=Side.CT),
            make_game(2, START, side=Side.T, winner=Side.T),
            make_game(3, START, side=Side.CT, winner=Side.T),
            make_game(4, START, side=Side.T, winner=Side.TIE),
        ]

        assert count_results(games) == (2, 1, 1)

    def test_counts_add_up(self):
        sides = [Side.CT, Side.T, Side.T, Side.CT, Side.CT]
        winners = [Side.T, Side.T, Side.TIE, Side.CT, Side.TIE]
        games = [make_game(i, START, side=s, winner=w) for i, (s, w) in enumerate(zip(sides, winners))]

        assert sum(count_results(games)) == len(games)


class TestAggregates:

    def test_averages_cover_every_field(self):
        games = [make_game(1, START, score=10), make_game(2, START, score=20), make_game(3, START, score=5)]

        averages = compute_averages(games)

        assert set(averages) == set(StatField)
        assert round(averages[StatField.SCORE].mean, 3) == 11.667

    def test_match_level_fields_come_from_the_match(self):
        games = [
            make_game(1, START, match_duration=1800, wait_time=30),
            make_game(2, START, match_duration=2400, wait_time=90),
        ]

        averages = compute_averages(games)

        assert averages[StatField.MATCH_DURATION].mean == 2100
        assert averages[StatField.WAIT_TIME].mean == 60

    def test_highest_tracks_match_id(self):
        games = [make_game(1, START, kills=12), make_game(2, START, kills=30), make_game(3, START, kills=30)]

        assert compute_highest(games)[StatField.KILLS] == HighestValue(value=30, match_id=2)

    def test_no_games_gives_empty_aggregates(self):
        assert compute_averages([]) == {}
        assert compute_highest([]) == {}
        assert compute_map_statistics([]) == []


class TestMapStatistics:

    def test_groups_by_map_in_discovery_order(self):
        games = [
            make_game(1, START, map_name="de_mirage", match_duration=2000, wait_time=40),
            make_game(2, START, map_name="de_dust2", match_duration=3000, wait_time=100),
            make_game(3, START, map_name="de_mirage", match_duration=2400, wait_time=60),
        ]

        assert compute_map_statistics(games) == [
            MapStatistic(name="de_mirage", times_played=2, average_match_duration=2200, average_wait_time=50),
            MapStatistic(name="de_dust2", times_played=1, average_match_duration=3000, average_wait_time=100),
        ]


class TestFindBestStreak:

    def test_sorts_by_date_before_scanning(self):
        games = [make_game(i, START + timedelta(days=i), score=i) for i in range(12)]

        streak = find_best_streak(list(reversed(games)))

        assert [g.match_id for g in streak] == list(range(2, 12))

    def test_too_few_games_gives_none(self):
        games = [make_game(i, START + timedelta(days=i)) for i in range(9)]

        assert find_best_streak(games) is None


class TestBuildProfile:

    def test_full_profile(self):
        player = make_player("p1", "Alice")
        games = [
            make_game(i + 1, START + timedelta(days=i), score=score, side=Side.CT, winner=Side.CT if i % 2 else Side.T)
            for i, score in enumerate([10, 20, 5] * 4)
        ]
        map_stats = compute_map_statistics(games)
        calendar = ()

        profile = build_profile(player, games, map_stats, calendar)

        assert profile.id == "p1"
        assert profile.name == "Alice"
        assert profile.matches_played == 12
        assert (profile.won, profile.lost, profile.tied) == (6, 6, 0)
        assert len(profile.best_streak) == 10
        assert profile.highest[StatField.SCORE].value == 20
        assert profile.map_stats == tuple(map_stats)

    def test_profile_without_games(self):
        profile = build_profile(make_player("p2"), [], [], [])

        assert profile.matches_played == 0
        assert (profile.won, profile.lost, profile.tied) == (0, 0, 0)
        assert profile.averages == {}
        assert profile.highest == {}
        assert profile.best_streak is None
        assert profile.map_stats == ()
        assert profile.activity_calendar == ()

    def test_custom_streak_length(self):
        games = [make_game(i, START + timedelta(days=i)) for i in range(3)]

        profile = build_profile(make_player("p3"), games, [], [], streak_length=3)

        assert len(profile.best_streak) == 3

    def test_calendar_is_passed_through(self):
        calendar = [ActivityCalendarEntry(day=date(2024, 1, 1), matches=1)]

        profile = build_profile(make_player("p4"), [make_game(1, START)], [], calendar)

        assert profile.activity_calendar == tuple(calendar)
