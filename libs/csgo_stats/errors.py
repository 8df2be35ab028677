"""
Error types raised by the CSGO stats engine.

Callers (bot commands, API routes) translate NotFoundError into a
"not found" reply and every other StatsError into a generic failure.
"""

from __future__ import annotations


class StatsError(Exception):
    """Base class for all errors raised by the stats engine."""


class NotFoundError(StatsError):
    """Unknown player, match or profile link."""

    def __init__(self, kind: str, key: object) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key!r}")


class InvalidInputError(StatsError, ValueError):
    """Empty statistical sample, malformed date range or unknown stat field."""


class InsufficientDataError(StatsError):
    """Not enough games to compute a fixed-size result."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Need at least {required} games, only {available} available")
