"""Scenario models produced by the enumerator.

Scenarios are frozen once built. Dumps use the camelCase keys the
scenario-selection screen reads (``estimatedSteps``, ``executionPath``,
``coveragePercentage``, ``openRequirements``).
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from flowplan.core.constants import ScenarioType


class ScenarioModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ConditionAssumption(ScenarioModel):
    """Truth value assumed for one block's predicate along a scenario's path."""

    block_name: str = Field(alias="blockName")
    condition: str
    result: bool


class CaptureRequirement(ScenarioModel):
    """A capture variable a runner must obtain from the live page."""

    block_id: str = Field(alias="blockId")
    key: str
    description: str = ""


class Scenario(ScenarioModel):
    """One concrete traversal of a flow, ready to be picked and run."""

    id: str
    name: str
    description: str
    type: ScenarioType
    conditions: list[ConditionAssumption] = Field(default_factory=list)
    execution_path: list[str] = Field(alias="executionPath")
    coverage_percentage: int = Field(default=0, alias="coveragePercentage")
    open_requirements: list[CaptureRequirement] = Field(
        default_factory=list, alias="openRequirements"
    )

    @computed_field(alias="estimatedSteps")  # type: ignore[prop-decorator]
    @property
    def estimated_steps(self) -> int:
        return len(self.execution_path)

    def to_dict(self) -> dict:
        """JSON-ready camelCase dump."""
        return self.model_dump(mode="json", by_alias=True)
