"""
Assembly of a player Profile from the player's full game history.

The functions here are pure: the service fetches games from the store,
resolves the cached sub-aggregates (map statistics, activity calendar) and
hands everything to build_profile. A player without games gets a Profile
with zero counts and empty aggregates; the statistics helpers are never
called on an empty history.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Optional, Sequence, Tuple

from libs.csgo_stats.errors import InsufficientDataError
from libs.csgo_stats.models import (
    ActivityCalendarEntry,
    HighestValue,
    MapStatistic,
    PlayerGame,
    PlayerRecord,
    Profile,
    Side,
    StatField,
    StatSummary,
)
from libs.csgo_stats.statistics import highest, summarize
from libs.csgo_stats.streaks import DEFAULT_STREAK_LENGTH, best_window


def count_results(games: Sequence[PlayerGame]) -> Tuple[int, int, int]:
    """Return (won, lost, tied) by comparing each game's side with its winner."""
    won = lost = tied = 0
    for game in games:
        if game.winner == Side.TIE:
            tied += 1
        elif game.stats.side == game.winner:
            won += 1
        else:
            lost += 1
    return won, lost, tied


def compute_averages(games: Sequence[PlayerGame]) -> Dict[StatField, StatSummary]:
    if not games:
        return {}
    return {field: summarize([field.value_of(game) for game in games]) for field in StatField}


def compute_highest(games: Sequence[PlayerGame]) -> Dict[StatField, HighestValue]:
    if not games:
        return {}
    return {
        field: highest((field.value_of(game), game.match_id) for game in games)
        for field in StatField
    }


def compute_map_statistics(games: Sequence[PlayerGame]) -> List[MapStatistic]:
    """
    Per-map play count and average duration/wait time.

    Maps are listed in the order they are first seen in `games`.
    """
    totals: Dict[str, List[float]] = {}
    for game in games:
        # [times_played, total_duration, total_wait]
        entry = totals.setdefault(game.map_name, [0, 0.0, 0.0])
        entry[0] += 1
        entry[1] += game.match_duration
        entry[2] += game.wait_time

    return [
        MapStatistic(
            name=name,
            times_played=int(times_played),
            average_match_duration=total_duration / times_played,
            average_wait_time=total_wait / times_played,
        )
        for name, (times_played, total_duration, total_wait) in totals.items()
    ]


def find_best_streak(
    games: Sequence[PlayerGame],
    size: int = DEFAULT_STREAK_LENGTH,
) -> Optional[Tuple[PlayerGame, ...]]:
    """Best run of `size` games in date order, or None when there are fewer games."""
    ordered = sorted(games, key=lambda game: game.date)
    try:
        return tuple(best_window(ordered, size))
    except InsufficientDataError:
        return None


def build_profile(
    player: PlayerRecord,
    games: Sequence[PlayerGame],
    map_stats: Sequence[MapStatistic],
    activity_calendar: Sequence[ActivityCalendarEntry],
    streak_length: int = DEFAULT_STREAK_LENGTH,
) -> Profile:
    """Compose a Profile. Raises whatever the aggregators raise; nothing is partially built."""
    won, lost, tied = count_results(games)

    return Profile(
        id=player.id,
        name=player.name,
        avatar_link=player.avatar_link,
        steam_link=player.steam_link,
        matches_played=len(games),
        won=won,
        lost=lost,
        tied=tied,
        averages=MappingProxyType(compute_averages(games)),
        highest=MappingProxyType(compute_highest(games)),
        map_stats=tuple(map_stats),
        best_streak=find_best_streak(games, streak_length),
        activity_calendar=tuple(activity_calendar),
    )
