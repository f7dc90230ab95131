"""Configuration module for flowplan."""

from flowplan.config.loader import FlowLoader
from flowplan.config.models import Block, FlowDocument
from flowplan.config.settings import EnumerationSettings

__all__ = ["FlowLoader", "FlowDocument", "Block", "EnumerationSettings"]
