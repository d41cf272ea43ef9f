"""Loading point schedules from YAML or JSON files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml

from .errors import InvalidArgumentError
from .schedule import ScoringSchedule


def _read_document(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() == ".json":
            return json.load(handle)
        return yaml.safe_load(handle)


def load_schedule(path: str | os.PathLike[str]) -> ScoringSchedule:
    """Read a custom schedule from ``path``.

    The document is either a bare list of point values or a mapping with a
    ``points`` list.  Files ending in ``.json`` are parsed as JSON, anything
    else as YAML.
    """

    schedule_path = Path(path)
    data = _read_document(schedule_path)
    if isinstance(data, dict):
        data = data.get("points")
    if not isinstance(data, list):
        raise InvalidArgumentError(
            f"Schedule file {schedule_path} must contain a list of points or a 'points' list"
        )
    return ScoringSchedule.custom(data)


__all__ = ["load_schedule"]
