"""
Entry point of the stats engine for bot commands and API routes.

StatsService reads raw records through a StatsStore, runs the aggregation
algorithms and memoizes the results in a StatsCache. Reads populate the
caches lazily; notify_new_match_data() drops all of them at once.
"""

from __future__ import annotations

import logging

from datetime import date
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from libs.csgo_stats.activity_calendar import build_activity_calendar
from libs.csgo_stats.cache import LEADERBOARD_KEY, CacheKind, StatsCache
from libs.csgo_stats.config import StatsConfig, get_stats_config
from libs.csgo_stats.errors import InvalidInputError, NotFoundError
from libs.csgo_stats.leaderboard import rank_leaderboard
from libs.csgo_stats.models import (
    ActivityCalendarEntry,
    BuiltProfile,
    LeaderboardEntry,
    MapStatistic,
    MatchRecord,
    PlayerGame,
    PlayerRecord,
    Profile,
    StatField,
)
from libs.csgo_stats.profile_builder import build_profile, compute_map_statistics
from libs.csgo_stats.solo_queue import classify_solo_queue
from libs.csgo_stats.store import StatsStore

logger = logging.getLogger(__name__)


class StatsService:
    """Cached access to CSGO profiles, matches, statistics and the leaderboard."""

    def __init__(
        self,
        store: StatsStore,
        cache: Optional[StatsCache] = None,
        config: Optional[StatsConfig] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._store = store
        self._config = config or get_stats_config()
        self._cache = cache or StatsCache(maxsize=self._config.cache_maxsize)
        self._today = today

    @property
    def cache(self) -> StatsCache:
        return self._cache

    # =========================================================================
    # Players
    # =========================================================================

    async def get_player(self, player_id: str) -> PlayerRecord:
        player = await self._store.get_player(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)
        return player

    async def get_player_by_link(self, steam_link: str) -> PlayerRecord:
        """Look a player up by Steam profile link. A trailing slash is ignored."""
        if steam_link.endswith("/"):
            steam_link = steam_link[:-1]

        player = await self._store.get_player_by_link(steam_link)
        if player is None:
            raise NotFoundError("Player with link", steam_link)
        return player

    async def search(self, name_prefix: str) -> List[PlayerRecord]:
        """
        Players whose name starts with `name_prefix`, ignoring case.

        Results are sorted by name, ignoring case. Prefixes shorter than the
        configured minimum (2 characters) return nothing.
        """
        if len(name_prefix) < self._config.min_search_length:
            return []

        prefix = name_prefix.casefold()
        players = await self._store.get_all_players()
        matches = [player for player in players if player.name.casefold().startswith(prefix)]
        return sorted(matches, key=lambda player: (player.name.casefold(), player.name))

    # =========================================================================
    # Profiles
    # =========================================================================

    async def get_profile(self, player_id: str) -> Profile:
        """
        Return the player's Profile, building and caching it on first request.

        Raises:
            NotFoundError: If the player does not exist.
            InvalidInputError: If one of the player's matches is dated after today.
        """
        cached = await self._cache.get(CacheKind.PROFILE, player_id)
        if cached is not None:
            logger.debug(f"Profile cache hit for {player_id}")
            return cached

        generation = self._cache.generation
        player = await self.get_player(player_id)
        games = await self._store.get_player_match_stat_lines(player_id)

        map_stats = await self._map_statistics_for(player_id, games, generation)
        calendar = await self._activity_calendar_for(player_id, games, generation)
        profile = build_profile(
            player,
            games,
            map_stats,
            calendar,
            streak_length=self._config.streak_length,
        )

        await self._cache.put(CacheKind.PROFILE, player_id, profile, generation)
        logger.info(f"Built profile for {player.name} ({player_id}) from {len(games)} matches")
        return profile

    async def get_profile_by_link(self, steam_link: str) -> Profile:
        player = await self.get_player_by_link(steam_link)
        return await self.get_profile(player.id)

    async def get_built_profiles(self, limit: Optional[int] = None) -> List[BuiltProfile]:
        """Summaries of the cached profiles with the most matches, most first."""
        limit = self._config.built_profiles_limit if limit is None else limit
        profiles: List[Profile] = await self._cache.values(CacheKind.PROFILE)
        profiles.sort(key=lambda profile: profile.matches_played, reverse=True)

        return [
            BuiltProfile(
                id=profile.id,
                name=profile.name,
                avatar_link=profile.avatar_link,
                steam_link=profile.steam_link,
                matches_count=profile.matches_played,
            )
            for profile in profiles[:limit]
        ]

    # =========================================================================
    # Per-player Aggregates
    # =========================================================================

    async def get_player_map_statistics(self, player_id: str) -> Tuple[MapStatistic, ...]:
        cached = await self._cache.get(CacheKind.MAP_STATISTICS, player_id)
        if cached is not None:
            return cached

        generation = self._cache.generation
        await self.get_player(player_id)
        games = await self._store.get_player_match_stat_lines(player_id)
        return await self._map_statistics_for(player_id, games, generation)

    async def get_player_match_frequency(self, player_id: str) -> Tuple[ActivityCalendarEntry, ...]:
        cached = await self._cache.get(CacheKind.ACTIVITY_CALENDAR, player_id)
        if cached is not None:
            return cached

        generation = self._cache.generation
        await self.get_player(player_id)
        games = await self._store.get_player_match_stat_lines(player_id)
        return await self._activity_calendar_for(player_id, games, generation)

    async def get_solo_queue_matches(self, player_id: str) -> FrozenSet[int]:
        """
        Ids of the player's solo-queue matches, classified over the whole history.

        Raises:
            NotFoundError: If the player does not exist.
        """
        cached = await self._cache.get(CacheKind.SOLO_QUEUE, player_id)
        if cached is not None:
            return cached

        generation = self._cache.generation
        await self.get_player(player_id)
        match_ids = await self._store.get_player_match_ids(player_id)
        matches = [await self.get_match(match_id) for match_id in match_ids]

        solo_matches = classify_solo_queue(player_id, matches)
        await self._cache.put(CacheKind.SOLO_QUEUE, player_id, solo_matches, generation)
        logger.info(f"Found {len(solo_matches)}/{len(match_ids)} solo-queue matches for {player_id}")
        return solo_matches

    async def get_player_statistics(
        self,
        player_id: str,
        field: StatField | str,
        solo_queue_only: bool = False,
    ) -> List[float]:
        """
        One stat for each of the player's matches, most recent first.

        Raises:
            InvalidInputError: If `field` is not a known stat.
            NotFoundError: If the player does not exist.
        """
        stat_field = StatField.parse(field)
        await self.get_player(player_id)
        games = await self._store.get_player_match_stat_lines(player_id)

        if solo_queue_only:
            solo_matches = await self.get_solo_queue_matches(player_id)
            games = [game for game in games if game.match_id in solo_matches]

        newest_first = sorted(games, key=lambda game: game.date, reverse=True)
        return [stat_field.value_of(game) for game in newest_first]

    async def get_player_matches(self, player_id: str, page: int = 0) -> List[PlayerGame]:
        """One page of the player's games in date order. Pages start at 0."""
        if page < 0:
            raise InvalidInputError(f"Invalid page: {page}. Must be >= 0.")

        await self.get_player(player_id)
        games = await self._store.get_player_match_stat_lines(player_id)
        ordered = sorted(games, key=lambda game: game.date)

        page_size = self._config.matches_page_size
        first = page * page_size
        return ordered[first:first + page_size]

    # =========================================================================
    # Matches & Leaderboard
    # =========================================================================

    async def get_match(self, match_id: int) -> MatchRecord:
        cached = await self._cache.get(CacheKind.MATCH, match_id)
        if cached is not None:
            return cached

        generation = self._cache.generation
        match = await self._store.get_match(match_id)
        if match is None:
            raise NotFoundError("Match", match_id)

        await self._cache.put(CacheKind.MATCH, match_id, match, generation)
        return match

    async def get_leaderboard(self) -> Tuple[LeaderboardEntry, ...]:
        """Top stat lines by score, served from cache until the next invalidation."""
        cached = await self._cache.get(CacheKind.LEADERBOARD, LEADERBOARD_KEY)
        if cached is not None:
            return cached

        generation = self._cache.generation
        rows = await self._store.get_all_players_with_stats()
        leaderboard = tuple(rank_leaderboard(rows, self._config.leaderboard_size))

        await self._cache.put(CacheKind.LEADERBOARD, LEADERBOARD_KEY, leaderboard, generation)
        logger.info(f"Built leaderboard with {len(leaderboard)} entries from {len(rows)} stat lines")
        return leaderboard

    # =========================================================================
    # Ingestion
    # =========================================================================

    async def notify_new_match_data(self) -> None:
        """Drop every cached aggregate so the next reads rebuild from the store."""
        await self._cache.invalidate_all()

    async def add_matches(self, matches: Sequence[MatchRecord]) -> int:
        """
        Save new matches through the store and invalidate the caches.

        Returns:
            Number of matches actually inserted.
        """
        inserted = await self._store.save_matches(matches)
        if inserted:
            await self.notify_new_match_data()
        else:
            logger.info(f"No new matches among {len(matches)} submitted, caches kept")
        return inserted

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _map_statistics_for(
        self,
        player_id: str,
        games: Sequence[PlayerGame],
        generation: int,
    ) -> Tuple[MapStatistic, ...]:
        cached = await self._cache.get(CacheKind.MAP_STATISTICS, player_id)
        if cached is not None:
            return cached

        map_stats = tuple(compute_map_statistics(games))
        await self._cache.put(CacheKind.MAP_STATISTICS, player_id, map_stats, generation)
        return map_stats

    async def _activity_calendar_for(
        self,
        player_id: str,
        games: Sequence[PlayerGame],
        generation: int,
    ) -> Tuple[ActivityCalendarEntry, ...]:
        cached = await self._cache.get(CacheKind.ACTIVITY_CALENDAR, player_id)
        if cached is not None:
            return cached

        if games:
            calendar = tuple(build_activity_calendar((game.date for game in games), today=self._today()))
        else:
            calendar = ()
        await self._cache.put(CacheKind.ACTIVITY_CALENDAR, player_id, calendar, generation)
        return calendar
