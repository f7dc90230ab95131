"""Observability module for flowplan."""

from flowplan.observability.logging import ContextLogger, configure_from_settings, setup_logging

__all__ = ["ContextLogger", "configure_from_settings", "setup_logging"]
