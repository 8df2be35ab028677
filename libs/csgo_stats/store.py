"""
Data store boundary for the stats engine.

StatsStore is the set of reads (and the one bulk write) the engine needs.
PostgresStatsStore implements it on an asyncpg pool over the csgo_players,
csgo_games and csgo_stats tables.
"""

from __future__ import annotations

import logging

from typing import Any, Dict, List, Optional, Protocol, Sequence

import asyncpg

from libs.csgo_stats.models import (
    MatchParticipant,
    MatchRecord,
    PlayerGame,
    PlayerMatchStatLine,
    PlayerRecord,
    PlayerStatRow,
    Side,
)

logger = logging.getLogger(__name__)


class StatsStore(Protocol):
    """Read access to players and matches, plus bulk match insertion."""

    async def get_player(self, player_id: str) -> Optional[PlayerRecord]: ...

    async def get_player_by_link(self, steam_link: str) -> Optional[PlayerRecord]: ...

    async def get_all_players(self) -> List[PlayerRecord]: ...

    async def get_match(self, match_id: int) -> Optional[MatchRecord]: ...

    async def get_player_match_stat_lines(self, player_id: str) -> List[PlayerGame]: ...

    async def get_player_match_ids(self, player_id: str) -> List[int]: ...

    async def get_all_players_with_stats(self) -> List[PlayerStatRow]: ...

    async def save_matches(self, matches: Sequence[MatchRecord]) -> int: ...


# =============================================================================
# Row Conversion
# =============================================================================

_PLAYER_COLUMNS = "p.id, p.name, p.avatar_link, p.steam_link"
_STAT_COLUMNS = "s.player_id, s.match_id, s.kills, s.deaths, s.assists, s.hsp, s.mvps, s.score, s.ping, s.side"
_GAME_COLUMNS = "g.date, g.map, g.match_duration, g.wait_time, g.ct_rounds, g.t_rounds, g.winner"


def _player_from_row(row: Any) -> PlayerRecord:
    return PlayerRecord(
        id=row["id"],
        name=row["name"],
        avatar_link=row["avatar_link"] or "",
        steam_link=row["steam_link"] or "",
    )


def _stat_line_from_row(row: Any) -> PlayerMatchStatLine:
    return PlayerMatchStatLine(
        player_id=row["player_id"],
        match_id=row["match_id"],
        kills=row["kills"],
        deaths=row["deaths"],
        assists=row["assists"],
        hsp=float(row["hsp"]),
        mvps=row["mvps"],
        score=row["score"],
        ping=row["ping"],
        side=Side(row["side"]),
    )


def _game_from_row(row: Any) -> PlayerGame:
    return PlayerGame(
        stats=_stat_line_from_row(row),
        date=row["date"],
        map_name=row["map"],
        match_duration=row["match_duration"],
        wait_time=row["wait_time"],
        ct_rounds=row["ct_rounds"],
        t_rounds=row["t_rounds"],
        winner=Side(row["winner"]),
    )


class PostgresStatsStore:
    """StatsStore backed by a PostgreSQL connection pool."""

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def get_player(self, player_id: str) -> Optional[PlayerRecord]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {_PLAYER_COLUMNS} FROM csgo_players p WHERE p.id = $1",
                player_id,
            )
        return _player_from_row(row) if row else None

    async def get_player_by_link(self, steam_link: str) -> Optional[PlayerRecord]:
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {_PLAYER_COLUMNS} FROM csgo_players p WHERE p.steam_link = $1",
                steam_link,
            )
        return _player_from_row(row) if row else None

    async def get_all_players(self) -> List[PlayerRecord]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(f"SELECT {_PLAYER_COLUMNS} FROM csgo_players p ORDER BY p.id")
        return [_player_from_row(row) for row in rows]

    async def get_match(self, match_id: int) -> Optional[MatchRecord]:
        async with self._pool.acquire() as conn:
            match_row = await conn.fetchrow(
                """
                SELECT id, date, map, match_duration, wait_time, ct_rounds, t_rounds, winner
                FROM csgo_games
                WHERE id = $1
                """,
                match_id,
            )
            if match_row is None:
                return None

            player_rows = await conn.fetch(
                f"""
                SELECT {_PLAYER_COLUMNS}, {_STAT_COLUMNS}
                FROM csgo_stats s
                INNER JOIN csgo_players p ON p.id = s.player_id
                WHERE s.match_id = $1
                ORDER BY s.side, s.score DESC, s.player_id
                """,
                match_id,
            )

        players = tuple(
            MatchParticipant(player=_player_from_row(row), stats=_stat_line_from_row(row))
            for row in player_rows
        )
        return MatchRecord(
            id=match_row["id"],
            date=match_row["date"],
            map_name=match_row["map"],
            match_duration=match_row["match_duration"],
            wait_time=match_row["wait_time"],
            ct_rounds=match_row["ct_rounds"],
            t_rounds=match_row["t_rounds"],
            winner=Side(match_row["winner"]),
            players=players,
        )

    async def get_player_match_stat_lines(self, player_id: str) -> List[PlayerGame]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_STAT_COLUMNS}, {_GAME_COLUMNS}
                FROM csgo_stats s
                INNER JOIN csgo_games g ON g.id = s.match_id
                WHERE s.player_id = $1
                ORDER BY g.date, g.id
                """,
                player_id,
            )
        return [_game_from_row(row) for row in rows]

    async def get_player_match_ids(self, player_id: str) -> List[int]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """
                SELECT s.match_id
                FROM csgo_stats s
                INNER JOIN csgo_games g ON g.id = s.match_id
                WHERE s.player_id = $1
                ORDER BY g.date, g.id
                """,
                player_id,
            )
        return [row["match_id"] for row in rows]

    async def get_all_players_with_stats(self) -> List[PlayerStatRow]:
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                f"""
                SELECT {_PLAYER_COLUMNS}, {_STAT_COLUMNS}
                FROM csgo_stats s
                INNER JOIN csgo_players p ON p.id = s.player_id
                ORDER BY s.match_id, s.player_id
                """
            )
        return [PlayerStatRow(player=_player_from_row(row), stats=_stat_line_from_row(row)) for row in rows]

    async def save_matches(self, matches: Sequence[MatchRecord]) -> int:
        """
        Insert matches with their players and stat lines in one transaction.

        Matches whose id already exists are skipped.

        Returns:
            Number of matches inserted.
        """
        if not matches:
            return 0

        async with self._pool.acquire() as conn:
            async with conn.transaction():
                existing_rows = await conn.fetch(
                    "SELECT id FROM csgo_games WHERE id = ANY($1::bigint[])",
                    [match.id for match in matches],
                )
                existing_ids = {row["id"] for row in existing_rows}
                new_matches = [match for match in matches if match.id not in existing_ids]

                skipped_count = len(matches) - len(new_matches)
                if skipped_count:
                    logger.info(f"Skipping {skipped_count} matches that already exist")
                if not new_matches:
                    return 0

                players: Dict[str, PlayerRecord] = {}
                for match in new_matches:
                    for participant in match.players:
                        players[participant.player.id] = participant.player

                await conn.executemany(
                    """
                    INSERT INTO csgo_players (id, name, avatar_link, steam_link)
                    VALUES ($1, $2, $3, $4)
                    ON CONFLICT (id) DO UPDATE
                    SET name = EXCLUDED.name,
                        avatar_link = EXCLUDED.avatar_link,
                        steam_link = EXCLUDED.steam_link
                    """,
                    [(p.id, p.name, p.avatar_link, p.steam_link) for p in players.values()],
                )

                await conn.executemany(
                    """
                    INSERT INTO csgo_games (id, date, map, match_duration, wait_time, ct_rounds, t_rounds, winner)
                    VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
                    ON CONFLICT (id) DO NOTHING
                    """,
                    [
                        (
                            m.id, m.date, m.map_name, m.match_duration, m.wait_time,
                            m.ct_rounds, m.t_rounds, m.winner.value,
                        )
                        for m in new_matches
                    ],
                )

                await conn.executemany(
                    """
                    INSERT INTO csgo_stats
                        (player_id, match_id, kills, deaths, assists, hsp, mvps, score, ping, side)
                    VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10)
                    ON CONFLICT (player_id, match_id) DO NOTHING
                    """,
                    [
                        (
                            s.player_id, s.match_id, s.kills, s.deaths, s.assists,
                            s.hsp, s.mvps, s.score, s.ping, s.side.value,
                        )
                        for m in new_matches
                        for s in (participant.stats for participant in m.players)
                    ],
                )

        logger.info(f"Inserted {len(new_matches)} matches")
        return len(new_matches)
