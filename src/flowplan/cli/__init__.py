"""Command line interface for flowplan."""
