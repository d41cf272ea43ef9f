"""Exceptions raised by the scoring engine."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a query receives an argument outside its valid domain."""


class EventLimitError(InvalidArgumentError):
    """Raised when the event count exceeds the configured enumeration ceiling."""

    def __init__(self, number_of_events: int, max_events: int) -> None:
        super().__init__(
            f"{number_of_events} events requires {2 ** number_of_events} outcomes; "
            f"the configured ceiling is {max_events} events"
        )
        self.number_of_events = number_of_events
        self.max_events = max_events


__all__ = ["InvalidArgumentError", "EventLimitError"]
