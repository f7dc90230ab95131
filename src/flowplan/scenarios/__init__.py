"""Scenario enumeration and coverage."""

from flowplan.scenarios.coverage import assign_coverage, total_coverage
from flowplan.scenarios.enumerator import ScenarioEnumerator, generate_scenarios
from flowplan.scenarios.models import CaptureRequirement, ConditionAssumption, Scenario
from flowplan.scenarios.selection import group_by_type, select_scenario

__all__ = [
    "ScenarioEnumerator",
    "generate_scenarios",
    "assign_coverage",
    "total_coverage",
    "Scenario",
    "ConditionAssumption",
    "CaptureRequirement",
    "select_scenario",
    "group_by_type",
]
