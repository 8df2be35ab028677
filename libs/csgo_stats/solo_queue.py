"""
Solo-queue classification of a player's match history.

A match counts as solo-queue when none of its other players had appeared in
any of the subject's earlier matches. The check is cumulative: every match
processed adds its co-players to the set of known players, whether or not
the match itself was solo, so the result depends on processing order.
Matches are processed in the order given, which callers keep oldest first.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Set

from libs.csgo_stats.models import MatchRecord

logger = logging.getLogger(__name__)


def classify_solo_queue(player_id: str, matches: Iterable[MatchRecord]) -> FrozenSet[int]:
    """Return the ids of the matches that were solo-queue for `player_id`."""
    seen_players: Set[str] = set()
    solo_match_ids: List[int] = []

    for match in matches:
        co_players = {p.player_id for p in match.players if p.player_id != player_id}

        if seen_players.isdisjoint(co_players):
            solo_match_ids.append(match.id)

        seen_players.update(co_players)

    logger.debug(f"Classified {len(solo_match_ids)} solo-queue matches for player {player_id}")
    return frozenset(solo_match_ids)
