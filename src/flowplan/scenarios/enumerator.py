"""Scenario enumeration over a validated flow graph.

Scenarios are emitted in a fixed order:

1. the main path, every conditional taken as yes and no loop exiting early
2. a yes/no pair for each conditional, in flow order
3. one iterated scenario for each while/for loop, in flow order

Branch and loop bodies are stood in for by synthesized ids
(``<id>-yes-<n>``, ``<id>-no-<n>``, ``<id>-iter-<k>``) spliced in right after
the originating block. Coverage is assigned by position once the list is
complete.
"""

import logging

from flowplan.config.models import (
    BaseBlock,
    ConditionalBlock,
    ForBlock,
    InteractionBlock,
    WhileBlock,
)
from flowplan.config.settings import EnumerationSettings
from flowplan.core.constants import DEFAULT_CONDITION_TEXT, MAIN_SCENARIO_ID, ScenarioType
from flowplan.core.placeholders import iteration_ids, no_placeholder_ids, yes_placeholder_ids
from flowplan.flow.graph import FlowGraph
from flowplan.scenarios.coverage import assign_coverage
from flowplan.scenarios.models import CaptureRequirement, ConditionAssumption, Scenario

logger = logging.getLogger(__name__)


class ScenarioEnumerator:
    """Derive the representative scenario list for one flow graph.

    The enumerator never mutates the graph and holds no state between calls;
    enumerating the same graph twice yields equal lists.
    """

    def __init__(self, graph: FlowGraph):
        self.graph = graph

    def enumerate(self) -> list[Scenario]:
        """Build every scenario in contract order with coverage assigned."""
        branch_scenarios: list[Scenario] = []
        loop_scenarios: list[Scenario] = []

        for index, block in enumerate(self.graph):
            match block:
                case ConditionalBlock():
                    branch_scenarios.append(self._branch_scenario(index, block, taken=True))
                    branch_scenarios.append(self._branch_scenario(index, block, taken=False))
                case WhileBlock() | ForBlock():
                    loop_scenarios.append(self._loop_scenario(index, block))
                case InteractionBlock():
                    pass
                case _:
                    raise TypeError(f"Unknown block kind: {type(block).__name__}")

        scenarios = [self._main_scenario(), *branch_scenarios, *loop_scenarios]
        logger.debug(
            f"Enumerated {len(scenarios)} scenarios for flow '{self.graph.name}' "
            f"({len(branch_scenarios) // 2} conditionals, {len(loop_scenarios)} loops)"
        )
        return assign_coverage(scenarios)

    def _main_scenario(self) -> Scenario:
        conditions = [
            ConditionAssumption(
                block_name=block.label,
                condition=block.condition or DEFAULT_CONDITION_TEXT,
                result=True,
            )
            for block in self.graph.conditionals()
        ]
        path = self.graph.block_ids
        return Scenario(
            id=MAIN_SCENARIO_ID,
            name="Main Path",
            description="Execute all steps with default conditions",
            type=ScenarioType.HAPPY_PATH,
            conditions=conditions,
            execution_path=path,
            open_requirements=self._open_requirements(path),
        )

    def _branch_scenario(self, index: int, block: ConditionalBlock, taken: bool) -> Scenario:
        if taken:
            inserted = yes_placeholder_ids(block.id)
            tag, outcome = "yes", "TRUE"
        else:
            inserted = no_placeholder_ids(block.id)
            tag, outcome = "no", "FALSE"

        path = self._splice(index, inserted)
        return Scenario(
            id=f"scenario-{block.id}-{tag}",
            name=f"{block.label} - {tag.upper()} Branch",
            description=f"Test when {block.label} condition is {outcome}",
            type=ScenarioType.CONDITIONAL,
            conditions=[
                ConditionAssumption(
                    block_name=block.label,
                    condition=block.condition or f"{block.label} condition",
                    result=taken,
                )
            ],
            execution_path=path,
            open_requirements=self._open_requirements(path),
        )

    def _loop_scenario(self, index: int, block: WhileBlock | ForBlock) -> Scenario:
        if isinstance(block, ForBlock):
            condition = f"repeat {block.iterations} times"
        else:
            condition = block.condition or f"{block.label} condition"

        path = self._splice(index, iteration_ids(block.id))
        return Scenario(
            id=f"scenario-{block.id}-loop",
            name=f"{block.label} - Loop Path",
            description=f"Test {block.label} with multiple iterations",
            type=ScenarioType.EDGE_CASE,
            conditions=[
                ConditionAssumption(block_name=block.label, condition=condition, result=True)
            ],
            execution_path=path,
            open_requirements=self._open_requirements(path),
        )

    def _splice(self, index: int, inserted: list[str]) -> list[str]:
        """Flow ids with ``inserted`` placed right after position ``index``."""
        ids = self.graph.block_ids
        return ids[: index + 1] + inserted + ids[index + 1 :]

    def _open_requirements(self, path: list[str]) -> list[CaptureRequirement]:
        """Capture variables on real blocks along ``path``, in path order."""
        return [
            CaptureRequirement(
                block_id=block_id, key=variable.key, description=variable.description
            )
            for block_id in path
            for variable in self.graph.captures(block_id)
        ]


def generate_scenarios(graph: FlowGraph) -> list[Scenario]:
    """Enumerate the scenarios of a validated flow graph."""
    return ScenarioEnumerator(graph).enumerate()


def scenarios_for_blocks(
    blocks: list[BaseBlock], settings: EnumerationSettings | None = None
) -> list[Scenario]:
    """Validate ``blocks`` and enumerate their scenarios in one call.

    Raises:
        ValidationError: If the blocks are rejected; no scenarios are produced.
    """
    return generate_scenarios(FlowGraph(blocks, settings=settings))
