"""
Population statistics and personal-best tracking over per-game samples.
"""

from __future__ import annotations

import math
import statistics

from typing import Iterable, Sequence, Tuple

from libs.csgo_stats.errors import InvalidInputError
from libs.csgo_stats.models import HighestValue, StatSummary


def summarize(samples: Sequence[float]) -> StatSummary:
    """
    Compute mean, standard deviation and standard error of a sample.

    Population formulas are used: the variance divides by n, not n - 1,
    and the standard error is the standard deviation over sqrt(n).

    Raises:
        InvalidInputError: If samples is empty or contains a non-finite value.
    """
    n = len(samples)
    if n == 0:
        raise InvalidInputError("Cannot summarize an empty sample")
    if not all(math.isfinite(x) for x in samples):
        raise InvalidInputError("Sample contains non-finite values")

    mean = statistics.fmean(samples)
    standard_deviation = statistics.pstdev(samples)
    standard_error = standard_deviation / math.sqrt(n)

    return StatSummary(
        mean=mean,
        standard_deviation=standard_deviation,
        standard_error=standard_error,
    )


def highest(pairs: Iterable[Tuple[float, int]]) -> HighestValue:
    """
    Return the (value, match_id) pair with the largest value.

    Ties keep the first maximum seen.

    Raises:
        InvalidInputError: If pairs is empty.
    """
    best: HighestValue | None = None
    for value, match_id in pairs:
        if best is None or value > best.value:
            best = HighestValue(value=value, match_id=match_id)

    if best is None:
        raise InvalidInputError("Cannot find the highest value of an empty sample")
    return best
