"""Public probability queries over a competition's outcome distribution.

Every query resolves the schedule, enumerates totals and masses for all
``2 ** N`` outcomes and hands them to :func:`aggregate` with the comparison
that defines it:

========================  ====================  ==============
query                     comparison            target
========================  ====================  ==============
``tie_probability``       ``EQUAL``             tie value
``win_probability``       ``GREATER``           tie value
``loss_probability``      ``LESS``              tie value
``score_probability``     ``GREATER_OR_EQUAL``  caller target
========================  ====================  ==============

A tie counts as neither a win nor a loss.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import List, Tuple

import polars as pl

from .distribution import (
    Comparison,
    aggregate,
    enumerate_distribution,
    validate_probability,
)
from .errors import InvalidArgumentError
from .schedule import EventsOrSchedule, ScoringSchedule, resolve_schedule, tie_value

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class OutcomeSummary:
    """Win, tie and loss probabilities for one competition."""

    number_of_events: int
    win_probability: float
    tie_value: float
    win: float
    tie: float
    loss: float

    @property
    def settled_win(self) -> float:
        """Win probability once a tie is settled by one extra event."""
        return self.win + self.tie * self.win_probability

    @property
    def settled_loss(self) -> float:
        return self.loss + self.tie * (1.0 - self.win_probability)


def _enumerate(
    events_or_schedule: EventsOrSchedule, win_probability: float
) -> Tuple[ScoringSchedule, List[float], List[float]]:
    p = validate_probability(win_probability)
    schedule = resolve_schedule(events_or_schedule)
    totals, masses = enumerate_distribution(schedule, p)
    return schedule, totals, masses


def _query(
    events_or_schedule: EventsOrSchedule,
    win_probability: float,
    comparison: Comparison,
    target: float | None = None,
) -> float:
    schedule, totals, masses = _enumerate(events_or_schedule, win_probability)
    if target is None:
        target = tie_value(schedule)
    result = aggregate(totals, masses, comparison, target)
    logger.debug(
        "%s against %s over %d events: %.12g",
        comparison.value,
        target,
        schedule.number_of_events,
        result,
    )
    return result


def tie_probability(events_or_schedule: EventsOrSchedule, win_probability: float) -> float:
    """Probability that both competitors finish on the tie value."""

    return _query(events_or_schedule, win_probability, Comparison.EQUAL)


def win_probability(events_or_schedule: EventsOrSchedule, win_probability: float) -> float:
    """Probability of finishing strictly above the tie value."""

    return _query(events_or_schedule, win_probability, Comparison.GREATER)


def loss_probability(events_or_schedule: EventsOrSchedule, win_probability: float) -> float:
    """Probability of finishing strictly below the tie value."""

    return _query(events_or_schedule, win_probability, Comparison.LESS)


def score_probability(
    events_or_schedule: EventsOrSchedule, win_probability: float, target_value: float
) -> float:
    """Probability of reaching or exceeding ``target_value`` points."""

    if isinstance(target_value, bool) or not isinstance(target_value, (int, float)):
        raise InvalidArgumentError(f"Target value must be a number, got {target_value!r}")
    if math.isnan(target_value):
        raise InvalidArgumentError("Target value cannot be NaN")
    return _query(
        events_or_schedule,
        win_probability,
        Comparison.GREATER_OR_EQUAL,
        float(target_value),
    )


def outcome_summary(events_or_schedule: EventsOrSchedule, win_probability: float) -> OutcomeSummary:
    """Win, tie and loss probabilities from a single enumeration."""

    schedule, totals, masses = _enumerate(events_or_schedule, win_probability)
    target = tie_value(schedule)
    return OutcomeSummary(
        number_of_events=schedule.number_of_events,
        win_probability=float(win_probability),
        tie_value=target,
        win=aggregate(totals, masses, Comparison.GREATER, target),
        tie=aggregate(totals, masses, Comparison.EQUAL, target),
        loss=aggregate(totals, masses, Comparison.LESS, target),
    )


def score_distribution(events_or_schedule: EventsOrSchedule, win_probability: float) -> pl.DataFrame:
    """Probability of every distinct point total.

    Returns a frame with one row per total (ascending) and the columns
    ``total``, ``outcomes`` (number of win/loss sequences reaching it),
    ``probability`` and ``at_least`` (probability of reaching or exceeding
    that total).
    """

    _schedule, totals, masses = _enumerate(events_or_schedule, win_probability)
    frame = pl.DataFrame(
        {"total": totals, "probability": masses},
        schema={"total": pl.Float64, "probability": pl.Float64},
    )
    return (
        frame.group_by("total")
        .agg(
            pl.len().cast(pl.Int64).alias("outcomes"),
            pl.col("probability").sum(),
        )
        .sort("total")
        .with_columns(pl.col("probability").cum_sum(reverse=True).alias("at_least"))
        .select("total", "outcomes", "probability", "at_least")
    )


__all__ = [
    "OutcomeSummary",
    "loss_probability",
    "outcome_summary",
    "score_distribution",
    "score_probability",
    "tie_probability",
    "tie_value",
    "win_probability",
]
