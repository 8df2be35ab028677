"""
Best run of consecutive games by total score.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Sequence

from libs.csgo_stats.errors import InsufficientDataError, InvalidInputError
from libs.csgo_stats.models import PlayerGame

DEFAULT_STREAK_LENGTH = 10


def best_window(games: Sequence[PlayerGame], size: int = DEFAULT_STREAK_LENGTH) -> List[PlayerGame]:
    """
    Find the contiguous run of `size` games with the highest total score.

    `games` must already be in chronological order. The first full window is
    the initial best and a later window replaces it only when its sum is
    strictly greater, so the earliest of equally good runs wins.

    Returns:
        The games of the best window, in their original order.

    Raises:
        InsufficientDataError: If fewer than `size` games are given.
    """
    if size < 1:
        raise InvalidInputError(f"Window size must be positive, got {size}")
    if len(games) < size:
        raise InsufficientDataError(required=size, available=len(games))

    window: Deque[PlayerGame] = deque()
    total = 0
    best_total = 0
    best_games: List[PlayerGame] = []

    for game in games:
        window.append(game)
        total += game.score

        if len(window) < size:
            continue

        if len(window) > size:
            total -= window.popleft().score

        if not best_games or total > best_total:
            best_total = total
            best_games = list(window)

    return best_games
