"""
Dense day-by-day match counts from a player's first match until today.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from libs.csgo_stats.errors import InvalidInputError
from libs.csgo_stats.models import ActivityCalendarEntry


def local_day(moment: datetime) -> date:
    """Calendar day of a timestamp in local time. Naive timestamps are taken as local."""
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def build_activity_calendar(
    match_dates: Iterable[datetime],
    today: Optional[date] = None,
) -> List[ActivityCalendarEntry]:
    """
    Count matches per calendar day between the earliest match and today.

    Every day in the range is present, days without matches have a count
    of zero, and several matches on one day add up.

    Args:
        match_dates: Match timestamps, in any order
        today: Last day of the calendar (default: the local current date)

    Raises:
        InvalidInputError: If there are no dates, or any match falls after today.
    """
    counts = Counter(local_day(moment) for moment in match_dates)
    if not counts:
        raise InvalidInputError("Cannot build an activity calendar without matches")

    today = today or date.today()
    first_day = min(counts)
    last_day = max(counts)
    if last_day > today:
        raise InvalidInputError(f"Match day {last_day} is after {today}")

    days = (today - first_day).days + 1
    return [
        ActivityCalendarEntry(day=day, matches=counts.get(day, 0))
        for day in (first_day + timedelta(days=offset) for offset in range(days))
    ]
