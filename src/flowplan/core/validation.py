"""Ingestion validation for recorded flows.

Runs once over the block sequence before a FlowGraph is built. Any failure
rejects the whole flow; there is no partial acceptance.

Usage:
    from flowplan.core.validation import validate_blocks

    validate_blocks(document.blocks, document.settings)
"""

import logging
from collections.abc import Sequence

from flowplan.config.models import (
    BaseBlock,
    ConditionalBlock,
    ForBlock,
    FromStepVariable,
)
from flowplan.config.settings import EnumerationSettings
from flowplan.core.errors import (
    DanglingBranchReference,
    DuplicateBlockError,
    DuplicateVariableError,
    InvalidIterationCount,
    InvalidVariableReference,
    PlaceholderCollisionError,
    ValidationError,
)
from flowplan.core.placeholders import synthesized_ids

logger = logging.getLogger(__name__)


def _reject(error: ValidationError) -> ValidationError:
    logger.warning(f"Flow rejected: {error}")
    return error


def validate_block_ids(blocks: Sequence[BaseBlock]) -> set[str]:
    """Check block ids are unique and return them.

    Raises:
        DuplicateBlockError: If two blocks share an id.
    """
    seen: set[str] = set()
    for index, block in enumerate(blocks):
        if block.id in seen:
            raise _reject(
                DuplicateBlockError(f"Duplicate block id '{block.id}'", index=index)
            )
        seen.add(block.id)
    return seen


def validate_variables(block: BaseBlock, index: int) -> None:
    """Check variable keys are unique and from_step references point backwards.

    Args:
        block: The owning block
        index: Position of the owning block in the flow

    Raises:
        DuplicateVariableError: If two variables share a key.
        InvalidVariableReference: If a from_step index is not strictly before ``index``.
    """
    keys: set[str] = set()
    for variable in block.variables:
        if variable.key in keys:
            raise _reject(
                DuplicateVariableError(
                    f"Duplicate variable '{variable.key}'", block_id=block.id
                )
            )
        keys.add(variable.key)

        if isinstance(variable, FromStepVariable):
            if not 0 <= variable.from_step < index:
                raise _reject(
                    InvalidVariableReference(
                        f"Variable '{variable.key}' must reference an earlier block",
                        block_id=block.id,
                        block_index=index,
                        from_step=variable.from_step,
                    )
                )


def validate_iterations(block: ForBlock) -> None:
    """Check a for block plans a positive whole number of iterations.

    Raises:
        InvalidIterationCount: On zero, negative, fractional or boolean counts.
    """
    count = block.iterations
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise _reject(
            InvalidIterationCount(
                "Iteration count must be a positive integer",
                block_id=block.id,
                iterations=count,
            )
        )


def validate_placeholder_ids(blocks: Sequence[BaseBlock]) -> set[str]:
    """Check no block id collides with a synthesized id and return the synthesized ids.

    Raises:
        PlaceholderCollisionError: If a real block reuses a placeholder id.
    """
    owners = synthesized_ids(blocks)
    for block in blocks:
        if block.id in owners:
            raise _reject(
                PlaceholderCollisionError(
                    f"Block id '{block.id}' is reserved for synthesized content",
                    block_id=block.id,
                    owner=owners[block.id],
                )
            )
    return set(owners)


def validate_branches(
    block: ConditionalBlock, known_ids: set[str], catalogue: set[str]
) -> None:
    """Check every branch id is addressable or catalogued branch content.

    Raises:
        DanglingBranchReference: If a branch id resolves nowhere.
    """
    for branch_id in block.paths.branch_ids():
        if branch_id not in known_ids and branch_id not in catalogue:
            raise _reject(
                DanglingBranchReference(
                    f"Branch references unknown block '{branch_id}'",
                    block_id=block.id,
                )
            )


def validate_blocks(
    blocks: Sequence[BaseBlock], settings: EnumerationSettings | None = None
) -> None:
    """Validate a block sequence in flow order.

    Args:
        blocks: Blocks in recorded order
        settings: Enumeration settings; branch ids are only resolved when
            ``enforce_branch_resolution`` is set

    Raises:
        ValidationError: The first rule violation found.
    """
    settings = settings or EnumerationSettings()
    block_ids = validate_block_ids(blocks)
    known_ids = block_ids | validate_placeholder_ids(blocks)
    catalogue = set(settings.branch_catalogue)

    for index, block in enumerate(blocks):
        validate_variables(block, index)

        if isinstance(block, ForBlock):
            validate_iterations(block)
        elif isinstance(block, ConditionalBlock) and settings.enforce_branch_resolution:
            validate_branches(block, known_ids, catalogue)

    logger.debug(f"Validated flow of {len(blocks)} blocks")
