"""
Record types for CSGO players, matches and the aggregates built from them.

Store records (PlayerRecord, MatchRecord, PlayerMatchStatLine, PlayerGame,
PlayerStatRow) are produced by the data store and never mutated here.
Aggregates (Profile, MapStatistic, ActivityCalendarEntry, LeaderboardEntry)
are built by the engine and shared through the caches, so every sequence on
them is a tuple and every mapping a read-only view.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Tuple

from libs.csgo_stats.errors import InvalidInputError


class Side(str, Enum):
    """Team side of a player, or the winner of a match."""

    CT = "CT"
    T = "T"
    TIE = "TIE"


class StatField(str, Enum):
    """Numeric per-game statistics that can be aggregated or listed."""

    KILLS = "kills"
    DEATHS = "deaths"
    ASSISTS = "assists"
    HSP = "hsp"
    MVPS = "mvps"
    SCORE = "score"
    PING = "ping"
    WAIT_TIME = "wait_time"
    MATCH_DURATION = "match_duration"

    @classmethod
    def parse(cls, value: "StatField | str") -> "StatField":
        """Return the StatField for an enum member or its name, case-insensitive."""
        if isinstance(value, StatField):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(field.value for field in cls)
            raise InvalidInputError(f"Unknown stat field: {value!r}. Valid fields: {valid}") from None

    def value_of(self, game: "PlayerGame") -> float:
        return STAT_FIELD_ACCESSORS[self](game)


@dataclass(frozen=True)
class PlayerRecord:
    id: str
    name: str
    avatar_link: str = ""
    steam_link: str = ""


@dataclass(frozen=True)
class PlayerMatchStatLine:
    """One player's performance in one match, keyed by (player_id, match_id)."""

    player_id: str
    match_id: int
    kills: int
    deaths: int
    assists: int
    hsp: float
    mvps: int
    score: int
    ping: int
    side: Side


@dataclass(frozen=True)
class MatchParticipant:
    player: PlayerRecord
    stats: PlayerMatchStatLine

    @property
    def player_id(self) -> str:
        return self.player.id


@dataclass(frozen=True)
class MatchRecord:
    """A completed match with its ordered participants."""

    id: int
    date: datetime
    map_name: str
    match_duration: int
    wait_time: int
    ct_rounds: int
    t_rounds: int
    winner: Side
    players: Tuple[MatchParticipant, ...] = ()


@dataclass(frozen=True)
class PlayerGame:
    """A stat line joined with the metadata of the match it belongs to."""

    stats: PlayerMatchStatLine
    date: datetime
    map_name: str
    match_duration: int
    wait_time: int
    ct_rounds: int
    t_rounds: int
    winner: Side

    @property
    def match_id(self) -> int:
        return self.stats.match_id

    @property
    def player_id(self) -> str:
        return self.stats.player_id

    @property
    def score(self) -> int:
        return self.stats.score


@dataclass(frozen=True)
class PlayerStatRow:
    """A stat line denormalized with its player, as returned for the leaderboard."""

    player: PlayerRecord
    stats: PlayerMatchStatLine


STAT_FIELD_ACCESSORS: Dict[StatField, Callable[[PlayerGame], float]] = {
    StatField.KILLS: lambda game: game.stats.kills,
    StatField.DEATHS: lambda game: game.stats.deaths,
    StatField.ASSISTS: lambda game: game.stats.assists,
    StatField.HSP: lambda game: game.stats.hsp,
    StatField.MVPS: lambda game: game.stats.mvps,
    StatField.SCORE: lambda game: game.stats.score,
    StatField.PING: lambda game: game.stats.ping,
    StatField.WAIT_TIME: lambda game: game.wait_time,
    StatField.MATCH_DURATION: lambda game: game.match_duration,
}


@dataclass(frozen=True)
class StatSummary:
    """Population mean, standard deviation and standard error of a sample."""

    mean: float
    standard_deviation: float
    standard_error: float


@dataclass(frozen=True)
class HighestValue:
    value: float
    match_id: int


@dataclass(frozen=True)
class MapStatistic:
    name: str
    times_played: int
    average_match_duration: float
    average_wait_time: float


@dataclass(frozen=True)
class ActivityCalendarEntry:
    day: date
    matches: int


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    player: PlayerRecord
    stats: PlayerMatchStatLine


@dataclass(frozen=True)
class Profile:
    """Fully aggregated view of one player. Always built whole."""

    id: str
    name: str
    avatar_link: str
    steam_link: str
    matches_played: int
    won: int
    lost: int
    tied: int
    averages: Mapping[StatField, StatSummary]
    highest: Mapping[StatField, HighestValue]
    map_stats: Tuple[MapStatistic, ...]
    best_streak: Optional[Tuple[PlayerGame, ...]]
    activity_calendar: Tuple[ActivityCalendarEntry, ...]


@dataclass(frozen=True)
class BuiltProfile:
    """Short summary of an already-built profile."""

    id: str
    name: str
    avatar_link: str
    steam_link: str
    matches_count: int
