"""Exhaustive totals, probability mass and threshold aggregation."""

from __future__ import annotations

import enum
import logging
import math
from typing import Callable, Dict, List, Sequence, Tuple

from .enumeration import iter_outcomes, validate_event_count
from .errors import InvalidArgumentError
from .schedule import EventsOrSchedule, ScoringSchedule, resolve_schedule

logger = logging.getLogger(__name__)


class Comparison(str, enum.Enum):
    """Predicate applied to each outcome total against a target."""

    EQUAL = "equal"
    GREATER = "greater"
    LESS = "less"
    GREATER_OR_EQUAL = "greater_or_equal"


_PREDICATES: Dict[Comparison, Callable[[float, float], bool]] = {
    Comparison.EQUAL: lambda total, target: total == target,
    Comparison.GREATER: lambda total, target: total > target,
    Comparison.LESS: lambda total, target: total < target,
    Comparison.GREATER_OR_EQUAL: lambda total, target: total >= target,
}


def validate_probability(win_probability: float) -> float:
    """Return ``win_probability`` as a float if it lies in ``[0, 1]``."""

    if isinstance(win_probability, bool) or not isinstance(win_probability, (int, float)):
        raise InvalidArgumentError(
            f"Win probability must be a number, got {win_probability!r}"
        )
    value = float(win_probability)
    if math.isnan(value) or value < 0.0 or value > 1.0:
        raise InvalidArgumentError(f"Win probability must be within [0, 1], got {win_probability!r}")
    return value


def generate_totals(events_or_schedule: EventsOrSchedule) -> List[float]:
    """Point total of every outcome, indexed like :func:`iter_outcomes`.

    An integer selects the default ``1..N`` schedule; a sequence of point
    values (or a :class:`ScoringSchedule`) is used as given.
    """

    schedule = resolve_schedule(events_or_schedule)
    return totals_for_schedule(schedule)


def totals_for_schedule(schedule: ScoringSchedule) -> List[float]:
    """Point totals for an already resolved schedule."""

    points = schedule.points
    totals: List[float] = []
    for outcome in iter_outcomes(schedule.number_of_events):
        total = 0.0
        for flag, value in zip(outcome.flags, points):
            total += flag * value
        totals.append(total)
    return totals


def generate_probability_mass(number_of_events: int, win_probability: float) -> List[float]:
    """Exact probability of every outcome under independent events.

    Outcome ``i`` has mass ``p ** wins * (1 - p) ** losses``.  Exponentiation
    is used directly so ``p == 0`` and ``p == 1`` give exact zeros and ones.
    """

    count = validate_event_count(number_of_events)
    p = validate_probability(win_probability)
    q = 1.0 - p
    return [p**outcome.wins * q ** (count - outcome.wins) for outcome in iter_outcomes(count)]


def enumerate_distribution(
    schedule: ScoringSchedule, win_probability: float
) -> Tuple[List[float], List[float]]:
    """Totals and masses for a resolved schedule from a single enumeration.

    Equivalent to :func:`totals_for_schedule` plus
    :func:`generate_probability_mass`, but each outcome is decomposed once.
    """

    p = validate_probability(win_probability)
    q = 1.0 - p
    count = schedule.number_of_events
    points = schedule.points
    totals: List[float] = []
    masses: List[float] = []
    for outcome in iter_outcomes(count):
        total = 0.0
        for flag, value in zip(outcome.flags, points):
            total += flag * value
        totals.append(total)
        masses.append(p**outcome.wins * q ** (count - outcome.wins))
    return totals, masses


def aggregate(
    totals: Sequence[float],
    masses: Sequence[float],
    comparison: Comparison | str,
    target: float,
) -> float:
    """Sum the mass of every outcome whose total satisfies ``comparison``.

    ``Comparison.EQUAL`` uses exact float equality.  Integer schedules produce
    exactly representable totals; fractional custom schedules may miss ties
    that differ only by rounding.
    """

    if len(totals) != len(masses):
        raise InvalidArgumentError(
            f"Totals and masses must have equal length ({len(totals)} != {len(masses)})"
        )
    try:
        mode = Comparison(comparison)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unsupported comparison: {comparison!r}") from exc
    predicate = _PREDICATES[mode]
    probability = 0.0
    for total, mass in zip(totals, masses):
        if predicate(total, target):
            probability += mass
    return probability


__all__ = [
    "Comparison",
    "aggregate",
    "enumerate_distribution",
    "generate_probability_mass",
    "generate_totals",
    "totals_for_schedule",
    "validate_probability",
]
