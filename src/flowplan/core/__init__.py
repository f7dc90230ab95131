"""Core errors, constants and validation for flowplan."""
