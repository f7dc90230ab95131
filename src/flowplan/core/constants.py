"""Core constants and enums."""

from enum import Enum


class NodeType(str, Enum):
    """Kinds of block in a recorded flow."""

    INTERACTION = "interaction"
    CONDITIONAL = "conditional"
    WHILE = "while"
    FOR = "for"


class ScenarioType(str, Enum):
    """Display grouping for generated scenarios."""

    HAPPY_PATH = "happy-path"
    EDGE_CASE = "edge-case"
    CONDITIONAL = "conditional"


# Synthesized placeholder counts for branch and loop bodies
YES_BRANCH_PLACEHOLDERS = 2
NO_BRANCH_PLACEHOLDERS = 1
LOOP_ITERATION_PLACEHOLDERS = 3

MAIN_SCENARIO_ID = "scenario-main"
DEFAULT_CONDITION_TEXT = "Default condition"
