"""Scoring schedules and the tie value they imply."""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Literal, Sequence, Tuple, Union

from .config import get_config
from .enumeration import validate_event_count
from .errors import EventLimitError, InvalidArgumentError

logger = logging.getLogger(__name__)

ScheduleKind = Literal["default", "custom"]


@dataclasses.dataclass(frozen=True, slots=True)
class ScoringSchedule:
    """Points awarded to the winner of each event, in event order."""

    points: Tuple[float, ...]
    kind: ScheduleKind = "custom"

    @classmethod
    def default(cls, number_of_events: int) -> "ScoringSchedule":
        """Schedule awarding ``j + 1`` points for event ``j``."""

        count = validate_event_count(number_of_events)
        return cls(points=tuple(float(j + 1) for j in range(count)), kind="default")

    @classmethod
    def custom(cls, points: Sequence[float]) -> "ScoringSchedule":
        """Schedule built from caller-supplied positive point values."""

        if isinstance(points, (str, bytes)) or not isinstance(points, Sequence):
            raise InvalidArgumentError(f"Schedule must be a sequence of numbers, got {points!r}")
        values = []
        for position, value in enumerate(points):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidArgumentError(
                    f"Point value for event {position} must be a number, got {value!r}"
                )
            number = float(value)
            if not math.isfinite(number) or number <= 0.0:
                raise InvalidArgumentError(
                    f"Point value for event {position} must be positive and finite, got {value!r}"
                )
            values.append(number)
        return cls(points=tuple(values), kind="custom")

    @property
    def number_of_events(self) -> int:
        return len(self.points)

    @property
    def total(self) -> float:
        total = 0.0
        for value in self.points:
            total += value
        return total

    def __len__(self) -> int:
        return len(self.points)


EventsOrSchedule = Union[int, Sequence[float], ScoringSchedule]


def _coerce_schedule(events_or_schedule: EventsOrSchedule) -> ScoringSchedule:
    if isinstance(events_or_schedule, ScoringSchedule):
        return events_or_schedule
    if isinstance(events_or_schedule, int) and not isinstance(events_or_schedule, bool):
        return ScoringSchedule.default(events_or_schedule)
    return ScoringSchedule.custom(events_or_schedule)  # type: ignore[arg-type]


def resolve_schedule(events_or_schedule: EventsOrSchedule) -> ScoringSchedule:
    """Turn an event count or point vector into a schedule ready to enumerate.

    The configured ``max_events`` ceiling is enforced here since every query
    passes through this step before allocating ``2 ** N`` totals.
    """

    schedule = _coerce_schedule(events_or_schedule)
    settings = get_config()
    count = schedule.number_of_events
    if count > settings.max_events:
        raise EventLimitError(count, settings.max_events)
    if count > settings.warn_events:
        logger.warning(
            "Enumerating %d outcomes for %d events; this may be slow",
            1 << count,
            count,
        )
    elif settings.verbose:
        logger.info("Resolved %s schedule with %d events", schedule.kind, count)
    return schedule


def tie_value(events_or_schedule: EventsOrSchedule) -> float:
    """Score at which both competitors split the available points evenly.

    For an event count (or a default schedule) this is the closed form
    ``N * (N + 1) / 4``; for a custom schedule it is half the point total.
    """

    if isinstance(events_or_schedule, int) and not isinstance(events_or_schedule, bool):
        count = validate_event_count(events_or_schedule)
        return count * (count + 1) / 4
    schedule = _coerce_schedule(events_or_schedule)
    if schedule.kind == "default":
        count = schedule.number_of_events
        return count * (count + 1) / 4
    return schedule.total / 2


__all__ = [
    "EventsOrSchedule",
    "ScheduleKind",
    "ScoringSchedule",
    "resolve_schedule",
    "tie_value",
]
