"""flowplan - test scenario planning for recorded automation flows.

Turns a recorded flow of interactions, conditionals and loops into an
ordered list of test scenarios with coverage figures.

Quick start:
    from flowplan import FlowGraph, FlowLoader, generate_scenarios

    document = FlowLoader.load("strategy.yaml")
    scenarios = generate_scenarios(FlowGraph.from_document(document))
"""

from flowplan.__version__ import __version__
from flowplan.config.loader import FlowLoader
from flowplan.config.models import (
    CaptureVariable,
    ConditionalBlock,
    FlowDocument,
    ForBlock,
    FromStepVariable,
    InteractionBlock,
    PresetVariable,
    WhileBlock,
)
from flowplan.config.settings import EnumerationSettings
from flowplan.core.errors import (
    ConfigurationError,
    DanglingBranchReference,
    DuplicateBlockError,
    DuplicateVariableError,
    FlowPlanError,
    InvalidIterationCount,
    InvalidVariableReference,
    PlaceholderCollisionError,
    ScenarioNotFoundError,
    ValidationError,
)
from flowplan.flow.graph import FlowGraph
from flowplan.scenarios import (
    Scenario,
    assign_coverage,
    generate_scenarios,
    select_scenario,
    total_coverage,
)

__all__ = [
    "__version__",
    # Flow model
    "FlowLoader",
    "FlowDocument",
    "FlowGraph",
    "EnumerationSettings",
    "InteractionBlock",
    "ConditionalBlock",
    "WhileBlock",
    "ForBlock",
    "PresetVariable",
    "FromStepVariable",
    "CaptureVariable",
    # Scenarios
    "Scenario",
    "generate_scenarios",
    "assign_coverage",
    "total_coverage",
    "select_scenario",
    # Errors
    "FlowPlanError",
    "ValidationError",
    "InvalidVariableReference",
    "InvalidIterationCount",
    "DanglingBranchReference",
    "DuplicateBlockError",
    "DuplicateVariableError",
    "PlaceholderCollisionError",
    "ConfigurationError",
    "ScenarioNotFoundError",
]
