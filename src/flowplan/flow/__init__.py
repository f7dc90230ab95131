"""Flow graph model."""

from flowplan.flow.graph import FlowGraph

__all__ = ["FlowGraph"]
