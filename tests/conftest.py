"""Shared fixtures for flowplan tests.

Blocks are built from the same camelCase dicts the authoring UI produces,
through the FlowDocument model, so tests exercise the discriminated unions.
"""

import logging
from typing import Any

import pytest

from flowplan.config.models import FlowDocument


def build_blocks(*raw_blocks: dict[str, Any]) -> list:
    """Parse raw block dicts into typed block models."""
    return list(FlowDocument.model_validate({"blocks": list(raw_blocks)}).blocks)


@pytest.fixture
def make_blocks():
    """
    Factory fixture turning raw block dicts into block models.

    Usage:
        def test_something(make_blocks):
            blocks = make_blocks({"id": "a"}, {"id": "b", "nodeType": "conditional"})
    """
    return build_blocks


@pytest.fixture
def conditional_flow():
    """[A(interaction), B(conditional "x>1"), C(interaction)]"""
    return build_blocks(
        {"id": "A", "name": "Open App"},
        {"id": "B", "name": "Check Balance", "nodeType": "conditional", "condition": "x>1"},
        {"id": "C", "name": "Swap"},
    )


@pytest.fixture
def loop_flow():
    """[A(interaction), L(for, iterations=5)]"""
    return build_blocks(
        {"id": "A", "name": "Open App"},
        {"id": "L", "name": "Claim Rewards", "nodeType": "for", "iterations": 5},
    )


@pytest.fixture
def mixed_flow():
    """Two conditionals and two loops interleaved with interactions."""
    return build_blocks(
        {
            "id": "connect",
            "name": "Connect Wallet",
            "variables": [
                {"key": "wallet", "type": "preset", "value": "MetaMask"},
                {"key": "address", "type": "capture", "description": "Connected address"},
            ],
        },
        {"id": "balance", "name": "Check Balance", "nodeType": "conditional",
         "condition": "balance >= 0.1 ETH",
         "paths": {"yes": {"blocks": ["swap"]}, "no": {"blocks": ["deposit"]}}},
        {"id": "poll", "name": "Wait For Price", "nodeType": "while",
         "condition": "price > target"},
        {"id": "swap", "name": "Swap Tokens",
         "variables": [{"key": "recipient", "type": "from_step", "fromStep": 0}]},
        {"id": "slippage", "name": "Check Slippage", "nodeType": "conditional"},
        {"id": "repeat", "name": "Repeat Swap", "nodeType": "for", "iterations": 2},
    )


@pytest.fixture(autouse=True)
def reset_flowplan_logging():
    """Undo setup_logging() between tests so handlers never outlive their streams."""
    yield
    logger = logging.getLogger("flowplan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
