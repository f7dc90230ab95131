"""Helpers for the scenario-selection hand-off."""

from collections.abc import Sequence

from flowplan.core.constants import ScenarioType
from flowplan.core.errors import ScenarioNotFoundError
from flowplan.scenarios.models import Scenario


def select_scenario(scenarios: Sequence[Scenario], scenario_id: str) -> Scenario:
    """Return the scenario a user picked by id.

    Raises:
        ScenarioNotFoundError: If no scenario has ``scenario_id``.
    """
    for scenario in scenarios:
        if scenario.id == scenario_id:
            return scenario
    raise ScenarioNotFoundError(
        f"Scenario '{scenario_id}' not found",
        available=", ".join(s.id for s in scenarios),
    )


def group_by_type(scenarios: Sequence[Scenario]) -> dict[ScenarioType, list[Scenario]]:
    """Group scenarios for display, keeping list order inside each group."""
    groups: dict[ScenarioType, list[Scenario]] = {kind: [] for kind in ScenarioType}
    for scenario in scenarios:
        groups[scenario.type].append(scenario)
    return groups
