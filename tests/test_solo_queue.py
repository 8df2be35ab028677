"""Tests for solo-queue classification."""

from datetime import datetime, timedelta

from libs.csgo_stats.solo_queue import classify_solo_queue

from factories import solo_match

START = datetime(2024, 3, 1, 18, 0)


def history(*co_player_sets):
    return [
        solo_match(match_id=i + 1, date=START + timedelta(days=i), subject="me", co_players=co_players)
        for i, co_players in enumerate(co_player_sets)
    ]


class TestClassifySoloQueue:
    """A match is solo-queue when no co-player was seen in an earlier match."""

    def test_first_match_is_always_solo(self):
        assert classify_solo_queue("me", history({"a", "b"})) == {1}

    def test_repeated_co_player_is_not_solo(self):
        matches = history({"a", "b"}, {"c", "d"}, {"a", "e"})

        assert classify_solo_queue("me", matches) == {1, 2}

    def test_non_solo_match_still_adds_its_players(self):
        # Match 2 repeats "a", so it is not solo; its new player "x" is still remembered
        matches = history({"a"}, {"a", "x"}, {"x"})

        assert classify_solo_queue("me", matches) == {1}

    def test_fresh_players_every_match(self):
        matches = history({"a"}, {"b"}, {"c"}, {"d"})

        assert classify_solo_queue("me", matches) == {1, 2, 3, 4}

    def test_subject_is_not_counted_as_co_player(self):
        matches = history({"a"}, {"b"})

        assert classify_solo_queue("me", matches) == {1, 2}

    def test_match_without_co_players_is_solo(self):
        matches = history(set(), {"a"}, set())

        assert classify_solo_queue("me", matches) == {1, 2, 3}

    def test_no_matches(self):
        assert classify_solo_queue("me", []) == frozenset()

    def test_result_is_subset_of_history(self):
        matches = history({"a", "b"}, {"b"}, {"c"}, {"a", "d"}, {"e"})

        result = classify_solo_queue("me", matches)

        assert result <= {m.id for m in matches}
        assert result == {1, 3, 5}
