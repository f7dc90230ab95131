"""Settings configuration models.

Branch id resolution and logging. Placeholder counts are fixed in
core.constants and cannot be set here.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class EnumerationSettings(BaseModel):
    """Knobs for scenario enumeration and flow validation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enforce_branch_resolution: bool = Field(
        default=False,
        description=(
            "Reject conditional branch ids that are not flow blocks, synthesized "
            "placeholders or listed in "
            "branch_catalogue. When off, branch ids are treated as opaque."
        ),
    )
    branch_catalogue: list[str] = Field(
        default_factory=list, description="Ids of externally recorded branch content"
    )


class LoggingSettings(BaseModel):
    """Logging configuration for the CLI."""

    level: LogLevel = Field(default="WARNING", description="Log level for the flowplan logger")
    json_file: str | None = Field(
        default=None, description="Optional path for rotating JSON log output"
    )
