"""
scoresystem: exact outcome probabilities for two-player, multi-event competitions.

Every win/loss sequence of the events is enumerated, so tie, win, loss and
score-threshold probabilities are exact sums rather than simulation estimates.
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - exercised in packaging workflows
    __version__ = version("scoresystem")
except PackageNotFoundError:  # pragma: no cover - local editable installs
    __version__ = "0.0.0"

_EXPORTS = {
    # Queries
    "tie_probability": ".queries",
    "win_probability": ".queries",
    "loss_probability": ".queries",
    "score_probability": ".queries",
    "outcome_summary": ".queries",
    "score_distribution": ".queries",
    "OutcomeSummary": ".queries",
    # Schedules
    "tie_value": ".schedule",
    "ScoringSchedule": ".schedule",
    "load_schedule": ".schedule_files",
    # Engine building blocks
    "Comparison": ".distribution",
    "aggregate": ".distribution",
    "generate_totals": ".distribution",
    "generate_probability_mass": ".distribution",
    "Outcome": ".enumeration",
    "decompose_outcome": ".enumeration",
    "iter_outcomes": ".enumeration",
    # Errors
    "InvalidArgumentError": ".errors",
    "EventLimitError": ".errors",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> object:  # pragma: no cover - thin lazy importer
    from importlib import import_module

    target_module = _EXPORTS.get(name)
    if not target_module:
        raise AttributeError(f"module {__name__} has no attribute {name}")
    module = import_module(target_module, __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:  # pragma: no cover - trivial
    return sorted(list(globals().keys()) + __all__)
