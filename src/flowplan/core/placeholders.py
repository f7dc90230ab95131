"""Synthesized ids standing in for branch and loop body content.

Counts are fixed: two ids per yes branch, one per no branch and three
iterations per loop, whatever the loop's declared count.
"""

from collections.abc import Iterable

from flowplan.config.models import BaseBlock, ConditionalBlock, ForBlock, WhileBlock
from flowplan.core.constants import (
    LOOP_ITERATION_PLACEHOLDERS,
    NO_BRANCH_PLACEHOLDERS,
    YES_BRANCH_PLACEHOLDERS,
)


def yes_placeholder_ids(block_id: str) -> list[str]:
    return [f"{block_id}-yes-{n}" for n in range(1, YES_BRANCH_PLACEHOLDERS + 1)]


def no_placeholder_ids(block_id: str) -> list[str]:
    return [f"{block_id}-no-{n}" for n in range(1, NO_BRANCH_PLACEHOLDERS + 1)]


def iteration_ids(block_id: str) -> list[str]:
    return [f"{block_id}-iter-{k}" for k in range(1, LOOP_ITERATION_PLACEHOLDERS + 1)]


def synthesized_ids(blocks: Iterable[BaseBlock]) -> dict[str, str]:
    """Map every synthesized id in a flow to the id of the block it belongs to."""
    owners: dict[str, str] = {}
    for block in blocks:
        if isinstance(block, ConditionalBlock):
            generated = yes_placeholder_ids(block.id) + no_placeholder_ids(block.id)
        elif isinstance(block, (WhileBlock, ForBlock)):
            generated = iteration_ids(block.id)
        else:
            continue
        for placeholder in generated:
            owners[placeholder] = block.id
    return owners
