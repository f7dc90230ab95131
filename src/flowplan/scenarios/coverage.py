"""Coverage figures for a generated scenario list.

The per-scenario figure is positional: scenario ``index`` of ``T`` gets
``round((index + 1) / T * 100)``. It tracks progress through the list, not
how much distinct branching behavior a scenario exercises.
"""

from collections.abc import Sequence

from flowplan.scenarios.models import Scenario


def _round_half_up(value: float) -> int:
    # Ties round up; round() would round half to even
    return int(value + 0.5)


def coverage_for(index: int, total: int) -> int:
    """Coverage percentage for position ``index`` (0-based) of ``total``."""
    if total < 1 or not 0 <= index < total:
        raise ValueError(f"index {index} out of range for {total} scenarios")
    return _round_half_up((index + 1) / total * 100)


def assign_coverage(scenarios: Sequence[Scenario]) -> list[Scenario]:
    """Return copies of ``scenarios`` with coverage set by position."""
    total = len(scenarios)
    return [
        scenario.model_copy(update={"coverage_percentage": coverage_for(index, total)})
        for index, scenario in enumerate(scenarios)
    ]


def total_coverage(scenarios: Sequence[Scenario]) -> int:
    """Mean of the per-scenario coverage figures, rounded; 0 for an empty list."""
    if not scenarios:
        return 0
    mean = sum(s.coverage_percentage for s in scenarios) / len(scenarios)
    return _round_half_up(mean)
