"""Exception hierarchy for flowplan.

All errors inherit from FlowPlanError and accept keyword context that is
rendered into the message, e.g. ``InvalidIterationCount("bad count",
block_id="loop")`` -> ``bad count (block_id=loop)``.
"""

from typing import Any


class FlowPlanError(Exception):
    """Base class for all flowplan errors."""

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigurationError(FlowPlanError):
    """Raised when a flow document or settings cannot be loaded."""


class ValidationError(FlowPlanError):
    """Raised when a flow fails ingestion validation."""


class DuplicateBlockError(ValidationError):
    """Two blocks in the flow share an id."""


class DuplicateVariableError(ValidationError):
    """Two variables in the same block share a key."""


class InvalidVariableReference(ValidationError):
    """A from_step variable points at a block that does not precede its owner."""


class InvalidIterationCount(ValidationError):
    """A for block declares a non-positive or non-integer iteration count."""


class DanglingBranchReference(ValidationError):
    """A conditional branch references an id unknown to the flow and catalogue."""


class PlaceholderCollisionError(ValidationError):
    """A block id equals an id synthesized for another block's branch or loop."""


class ScenarioNotFoundError(FlowPlanError):
    """Raised when a selected scenario id is not in the generated list."""
