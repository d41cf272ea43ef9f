"""Logging helpers for the scoring engine."""

from __future__ import annotations

import logging
from typing import Iterable


def configure_logging(level: int = logging.INFO, handlers: Iterable[logging.Handler] | None = None) -> None:
    """Configure root logging for command line sessions.

    Enumeration is exponential in the number of events, so the engine logs
    outcome counts at debug level and warns before large runs.  Applications
    embedding the package can call this helper to get the same format.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=list(handlers) if handlers else None,
    )

