"""Tests for scoring schedules, tie values and schedule files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from scoresystem.config import update_config
from scoresystem.errors import InvalidArgumentError
from scoresystem.schedule import ScoringSchedule, resolve_schedule, tie_value
from scoresystem.schedule_files import load_schedule


def test_default_schedule_points() -> None:
    schedule = ScoringSchedule.default(4)

    assert schedule.points == (1.0, 2.0, 3.0, 4.0)
    assert schedule.kind == "default"
    assert schedule.number_of_events == 4
    assert schedule.total == 10.0


@pytest.mark.parametrize("events", range(0, 30))
def test_tie_value_closed_form(events: int) -> None:
    assert tie_value(events) == events * (events + 1) / 4


def test_tie_value_examples() -> None:
    assert tie_value(16) == 68.0
    assert tie_value(0) == 0.0
    assert tie_value(3) == 3.0
    assert tie_value(5) == 7.5


def test_tie_value_custom_schedule_is_half_the_total() -> None:
    assert tie_value([3, 1, 2]) == 3.0
    assert tie_value([2.5, 4]) == 3.25
    assert tie_value([]) == 0.0
    assert tie_value(ScoringSchedule.default(16)) == 68.0


def test_tie_value_rejects_negative_events() -> None:
    with pytest.raises(InvalidArgumentError):
        tie_value(-1)


@pytest.mark.parametrize(
    "points",
    [[1, 0], [1, -3], [1, float("inf")], [1, float("nan")], ["1", 2], [True, 2], "123"],
)
def test_custom_schedule_rejects_invalid_points(points: object) -> None:
    with pytest.raises(InvalidArgumentError):
        ScoringSchedule.custom(points)  # type: ignore[arg-type]


def test_resolve_schedule_dispatches_on_input() -> None:
    assert resolve_schedule(3).kind == "default"
    assert resolve_schedule((2, 2)).points == (2.0, 2.0)
    custom = ScoringSchedule.custom([5])
    assert resolve_schedule(custom) is custom


def test_resolve_schedule_warns_above_threshold(caplog: pytest.LogCaptureFixture) -> None:
    update_config(warn_events=2)

    with caplog.at_level(logging.WARNING, logger="scoresystem.schedule"):
        resolve_schedule(3)

    assert any("8 outcomes for 3 events" in record.getMessage() for record in caplog.records)


def test_load_schedule_from_yaml(schedule_yaml: Path) -> None:
    schedule = load_schedule(schedule_yaml)

    assert schedule.points == (3.0, 1.0, 2.0)
    assert schedule.kind == "custom"


def test_load_schedule_from_json_list(tmp_path: Path) -> None:
    path = tmp_path / "points.json"
    path.write_text(json.dumps([1, 2, 4]), encoding="utf-8")

    assert load_schedule(path).points == (1.0, 2.0, 4.0)


def test_load_schedule_rejects_non_list(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("points: 7\n", encoding="utf-8")

    with pytest.raises(InvalidArgumentError, match="list of points"):
        load_schedule(path)


def test_load_schedule_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_schedule(tmp_path / "missing.yaml")
