"""Tests for leaderboard ranking."""

from libs.csgo_stats.leaderboard import rank_leaderboard
from libs.csgo_stats.models import PlayerStatRow

from factories import make_player, make_stat_line


def rows_with_scores(scores):
    return [
        PlayerStatRow(player=make_player(f"p{i}"), stats=make_stat_line(f"p{i}", match_id=i, score=score))
        for i, score in enumerate(scores)
    ]


class TestRankLeaderboard:

    def test_sorted_by_score_descending(self):
        board = rank_leaderboard(rows_with_scores([5, 40, 12, 33]))

        assert [entry.stats.score for entry in board] == [40, 33, 12, 5]
        assert [entry.rank for entry in board] == [1, 2, 3, 4]

    def test_truncated_to_limit(self):
        board = rank_leaderboard(rows_with_scores(range(250)))

        assert len(board) == 100
        assert board[0].stats.score == 249
        assert board[-1].stats.score == 150

    def test_equal_scores_keep_retrieval_order(self):
        board = rank_leaderboard(rows_with_scores([10, 20, 10, 20]))

        assert [entry.player.id for entry in board] == ["p1", "p3", "p0", "p2"]

    def test_fewer_rows_than_limit(self):
        assert len(rank_leaderboard(rows_with_scores([1, 2]), limit=5)) == 2

    def test_no_rows(self):
        assert rank_leaderboard([]) == []
