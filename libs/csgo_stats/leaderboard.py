"""Global leaderboard ranking of stat lines by score."""

from __future__ import annotations

from typing import Iterable, List

from libs.csgo_stats.models import LeaderboardEntry, PlayerStatRow

DEFAULT_LEADERBOARD_SIZE = 100


def rank_leaderboard(rows: Iterable[PlayerStatRow], limit: int = DEFAULT_LEADERBOARD_SIZE) -> List[LeaderboardEntry]:
    """Top `limit` rows by score, highest first. Equal scores keep their retrieval order."""
    ranked = sorted(rows, key=lambda row: row.stats.score, reverse=True)[:limit]
    return [
        LeaderboardEntry(rank=position, player=row.player, stats=row.stats)
        for position, row in enumerate(ranked, start=1)
    ]
