"""Validated, read-only view of a recorded flow.

FlowGraph is the only input the scenario enumerator accepts. Building one
runs ingestion validation, so holding a FlowGraph means the flow is valid.
Branch and loop bodies are not modeled as nested flows; they are stood in
for by synthesized placeholder ids.
"""

import logging
from collections.abc import Iterator, Sequence

from flowplan.config.models import (
    BaseBlock,
    CaptureVariable,
    ConditionalBlock,
    FlowDocument,
    ForBlock,
    WhileBlock,
)
from flowplan.config.settings import EnumerationSettings
from flowplan.core.placeholders import synthesized_ids
from flowplan.core.validation import validate_blocks

logger = logging.getLogger(__name__)


class FlowGraph:
    """Immutable snapshot of a validated block sequence."""

    def __init__(
        self,
        blocks: Sequence[BaseBlock],
        settings: EnumerationSettings | None = None,
        name: str = "",
    ):
        """Validate and freeze a block sequence.

        Args:
            blocks: Blocks in recorded order
            settings: Enumeration settings (defaults reproduce the standard counts)
            name: Optional strategy name

        Raises:
            ValidationError: If the flow is rejected.
        """
        self._settings = settings or EnumerationSettings()
        validate_blocks(blocks, self._settings)
        self._blocks: tuple[BaseBlock, ...] = tuple(blocks)
        self._index = {block.id: i for i, block in enumerate(self._blocks)}
        self.name = name
        logger.debug(f"Built flow graph '{name}' with {len(self._blocks)} blocks")

    @classmethod
    def from_document(cls, document: FlowDocument) -> "FlowGraph":
        """Build a graph from a loaded flow document."""
        return cls(document.blocks, settings=document.settings, name=document.name)

    @property
    def blocks(self) -> tuple[BaseBlock, ...]:
        return self._blocks

    @property
    def settings(self) -> EnumerationSettings:
        return self._settings

    @property
    def block_ids(self) -> list[str]:
        return [block.id for block in self._blocks]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[BaseBlock]:
        return iter(self._blocks)

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._index

    def get(self, block_id: str) -> BaseBlock | None:
        """Return the block with ``block_id`` or None."""
        index = self._index.get(block_id)
        return None if index is None else self._blocks[index]

    def index_of(self, block_id: str) -> int:
        """Position of a block in flow order.

        Raises:
            KeyError: If no block has that id.
        """
        return self._index[block_id]

    def conditionals(self) -> list[ConditionalBlock]:
        """Conditional blocks in flow order."""
        return [b for b in self._blocks if isinstance(b, ConditionalBlock)]

    def loops(self) -> list[WhileBlock | ForBlock]:
        """While and for blocks in flow order."""
        return [b for b in self._blocks if isinstance(b, (WhileBlock, ForBlock))]

    def captures(self, block_id: str) -> list[CaptureVariable]:
        """Capture variables declared on a block; empty for unknown ids."""
        block = self.get(block_id)
        if block is None:
            return []
        return [v for v in block.variables if isinstance(v, CaptureVariable)]

    def addressable_ids(self) -> set[str]:
        """Flow block ids plus every synthesized branch and iteration id."""
        return set(self._index) | set(synthesized_ids(self._blocks))
