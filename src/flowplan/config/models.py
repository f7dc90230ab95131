"""Flow document models with discriminated unions.

Blocks and variables are recorded by the authoring UI and arrive with
camelCase keys (``nodeType``, ``fromStep``). Each block kind has its own
class carrying only the fields meaningful for it; ``nodeType`` selects the
class and defaults to ``interaction`` when absent.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator

from flowplan.config.settings import EnumerationSettings
from flowplan.core.constants import NodeType

# DSL version constants
SUPPORTED_VERSIONS = frozenset({"1.0"})
CURRENT_VERSION = "1.0"


class FlowModel(BaseModel):
    """Base for all flow document models: immutable, camelCase or snake_case input."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# --- Variables ---


class BaseVariable(FlowModel):
    """Fields shared by every variable kind."""

    key: str = Field(description="Variable name, unique within its block")
    value: str | None = Field(default=None, description="Recorded or preset value")


class PresetVariable(BaseVariable):
    """Literal value known at authoring time."""

    type: Literal["preset"] = "preset"


class FromStepVariable(BaseVariable):
    """Value produced by an earlier block, referenced by block index."""

    type: Literal["from_step"] = "from_step"
    from_step: int = Field(alias="fromStep", description="Index of the producing block")


class CaptureVariable(BaseVariable):
    """Value only obtainable at run time from the live page."""

    type: Literal["capture"] = "capture"
    description: str = Field(default="", description="What the user must capture")


Variable = Annotated[
    PresetVariable | FromStepVariable | CaptureVariable,
    Field(discriminator="type"),
]


# --- Blocks ---


class BranchPath(FlowModel):
    """Block ids recorded for one side of a conditional."""

    blocks: list[str] = Field(default_factory=list)


class ConditionalPaths(FlowModel):
    """Yes/no branches of a conditional. A missing branch means skip."""

    yes: BranchPath | None = None
    no: BranchPath | None = None

    @model_validator(mode="before")
    @classmethod
    def _boolean_keys(cls, data: Any) -> Any:
        # YAML 1.1 loads bare yes/no keys as booleans
        if isinstance(data, dict) and (True in data or False in data):
            data = dict(data)
            for flag, key in ((True, "yes"), (False, "no")):
                if flag in data:
                    data.setdefault(key, data.pop(flag))
        return data

    def branch_ids(self) -> list[str]:
        """All ids referenced by either branch, yes side first."""
        ids: list[str] = []
        for path in (self.yes, self.no):
            if path is not None:
                ids.extend(path.blocks)
        return ids


class BaseBlock(FlowModel):
    """Fields shared by every block kind."""

    id: str = Field(description="Unique block identifier within the flow")
    name: str = Field(default="", description="Display name")
    goal: str = Field(default="", description="What the recorded step achieves")
    variables: list[Variable] = Field(default_factory=list)

    @property
    def label(self) -> str:
        """Display name, falling back to the id."""
        return self.name or self.id


class InteractionBlock(BaseBlock):
    """A plain recorded browser or wallet interaction."""

    node_type: Literal["interaction"] = Field(default="interaction", alias="nodeType")


class ConditionalBlock(BaseBlock):
    """A yes/no branch on a free-text predicate."""

    node_type: Literal["conditional"] = Field(default="conditional", alias="nodeType")
    condition: str | None = Field(default=None, description="Predicate text, never evaluated")
    paths: ConditionalPaths = Field(default_factory=ConditionalPaths)


class WhileBlock(BaseBlock):
    """A loop that repeats while its predicate holds."""

    node_type: Literal["while"] = Field(default="while", alias="nodeType")
    condition: str | None = Field(default=None, description="Loop predicate text")


class ForBlock(BaseBlock):
    """A loop with a planned repeat count."""

    node_type: Literal["for"] = Field(default="for", alias="nodeType")
    # Checked by core.validation so bad counts raise InvalidIterationCount
    iterations: bool | int | float = Field(default=1, description="Planned repeat count")


def _block_kind(value: Any) -> str:
    """Pick the block class tag, defaulting to interaction."""
    if isinstance(value, dict):
        kind = value.get("nodeType", value.get("node_type", NodeType.INTERACTION))
    else:
        kind = getattr(value, "node_type", NodeType.INTERACTION)
    return kind.value if isinstance(kind, NodeType) else str(kind)


Block = Annotated[
    Annotated[InteractionBlock, Tag("interaction")]
    | Annotated[ConditionalBlock, Tag("conditional")]
    | Annotated[WhileBlock, Tag("while")]
    | Annotated[ForBlock, Tag("for")],
    Discriminator(_block_kind),
]


class FlowDocument(FlowModel):
    """A recorded flow as handed over by the authoring UI."""

    version: str = Field(default=CURRENT_VERSION, description="Document format version")
    name: str = Field(default="", description="Strategy name")
    settings: EnumerationSettings = Field(default_factory=EnumerationSettings)
    blocks: list[Block] = Field(default_factory=list)


__all__ = [
    "SUPPORTED_VERSIONS",
    "CURRENT_VERSION",
    "PresetVariable",
    "FromStepVariable",
    "CaptureVariable",
    "Variable",
    "BranchPath",
    "ConditionalPaths",
    "BaseBlock",
    "InteractionBlock",
    "ConditionalBlock",
    "WhileBlock",
    "ForBlock",
    "Block",
    "FlowDocument",
]
