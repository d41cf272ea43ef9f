from __future__ import annotations

from pathlib import Path

import pytest

from scoresystem.config import reset_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "SCORESYSTEM_MAX_EVENTS",
        "SCORESYSTEM_WARN_EVENTS",
        "SCORESYSTEM_DEFAULT_PROBABILITY",
        "SCORESYSTEM_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield


@pytest.fixture
def schedule_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "schedule.yaml"
    path.write_text("# relay weighting\npoints: [3, 1, 2]\n", encoding="utf-8")
    return path
