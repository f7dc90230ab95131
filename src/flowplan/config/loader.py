"""Loader for recorded flow documents (YAML or JSON)."""

import logging
from pathlib import Path
from typing import Any

import pydantic
import yaml

from flowplan.config.models import SUPPORTED_VERSIONS, FlowDocument
from flowplan.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class FlowLoader:
    """Load a FlowDocument from a file or an already-parsed mapping."""

    @staticmethod
    def load(path: Path | str) -> FlowDocument:
        """Load a flow document from a YAML or JSON file.

        Args:
            path: Path to the flow file

        Returns:
            Parsed FlowDocument (schema-checked, not yet flow-validated)

        Raises:
            ConfigurationError: If the file is missing, unparseable or malformed
        """
        flow_path = Path(path)
        if not flow_path.is_file():
            raise ConfigurationError("Flow file not found", path=str(flow_path))

        try:
            with open(flow_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML: {e}", path=str(flow_path)) from e

        logger.debug(f"Loaded flow file {flow_path}")
        return FlowLoader.from_data(data, source=str(flow_path))

    @staticmethod
    def from_data(data: Any, source: str = "<memory>") -> FlowDocument:
        """Build a FlowDocument from parsed data.

        A bare list is accepted as the block sequence of an unnamed flow.
        """
        if data is None:
            data = {}
        if isinstance(data, list):
            data = {"blocks": data}
        if not isinstance(data, dict):
            raise ConfigurationError("Flow document must be a mapping or a list", path=source)

        version = str(data.get("version", "1.0"))
        if version not in SUPPORTED_VERSIONS:
            raise ConfigurationError(
                f"Unsupported flow version '{version}'. Supported: {sorted(SUPPORTED_VERSIONS)}",
                path=source,
            )

        try:
            return FlowDocument.model_validate({**data, "version": version})
        except pydantic.ValidationError as e:
            raise ConfigurationError(f"Malformed flow document: {e}", path=source) from e
