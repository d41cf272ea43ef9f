"""Enumeration of every win/loss sequence for a fixed number of events.

Outcome ``i`` corresponds to the binary expansion of ``i``: bit ``j`` set means
the player of interest won event ``j``.  The least-significant bit is event 0,
which is the same position the schedule is indexed by when totals are built.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterator, Tuple

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Outcome:
    """One assignment of win (1) or loss (0) to every event."""

    index: int
    flags: Tuple[int, ...]
    wins: int

    @property
    def losses(self) -> int:
        return len(self.flags) - self.wins


def validate_event_count(number_of_events: int) -> int:
    """Return ``number_of_events`` if it is a non-negative integer."""

    if isinstance(number_of_events, bool) or not isinstance(number_of_events, int):
        raise InvalidArgumentError(
            f"Number of events must be an integer, got {number_of_events!r}"
        )
    if number_of_events < 0:
        raise InvalidArgumentError(f"Number of events cannot be negative: {number_of_events}")
    return number_of_events


def outcome_count(number_of_events: int) -> int:
    """Number of distinct outcomes (``2 ** number_of_events``)."""

    return 1 << validate_event_count(number_of_events)


def decompose_outcome(index: int, number_of_events: int) -> Outcome:
    """Expand ``index`` into its per-event win flags and win count.

    Raises
    ------
    InvalidArgumentError
        If ``index`` falls outside ``[0, 2 ** number_of_events)``.
    """

    size = outcome_count(number_of_events)
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(f"Outcome index must be an integer, got {index!r}")
    if index < 0 or index >= size:
        raise InvalidArgumentError(
            f"Outcome index {index} outside [0, {size}) for {number_of_events} events"
        )
    flags = [0] * number_of_events
    wins = 0
    position = 0
    remaining = index
    while remaining != 0:
        bit = remaining % 2
        if bit == 1:
            wins += 1
        flags[position] = bit
        remaining //= 2
        position += 1
    return Outcome(index=index, flags=tuple(flags), wins=wins)


def iter_outcomes(number_of_events: int) -> Iterator[Outcome]:
    """Yield every outcome in index order, each exactly once."""

    size = outcome_count(number_of_events)
    logger.debug("Enumerating %d outcomes for %d events", size, number_of_events)
    for index in range(size):
        yield decompose_outcome(index, number_of_events)


__all__ = [
    "Outcome",
    "decompose_outcome",
    "iter_outcomes",
    "outcome_count",
    "validate_event_count",
]
