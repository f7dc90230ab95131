"""Unit tests for flow ingestion validation."""

import logging

import pytest

from flowplan.config.settings import EnumerationSettings
from flowplan.core.errors import (
    DanglingBranchReference,
    DuplicateBlockError,
    DuplicateVariableError,
    InvalidIterationCount,
    InvalidVariableReference,
    PlaceholderCollisionError,
)
from flowplan.core.validation import validate_blocks


class TestBlockIds:
    def test_unique_ids_pass(self, mixed_flow):
        validate_blocks(mixed_flow)

    def test_duplicate_id_rejected(self, make_blocks):
        # Arrange
        blocks = make_blocks({"id": "a"}, {"id": "b"}, {"id": "a", "nodeType": "while"})

        # Act & Assert
        with pytest.raises(DuplicateBlockError, match="Duplicate block id 'a'") as exc_info:
            validate_blocks(blocks)
        assert exc_info.value.context["index"] == 2


class TestVariables:
    def test_backward_reference_passes(self, make_blocks):
        blocks = make_blocks(
            {"id": "a"},
            {"id": "b"},
            {"id": "c", "variables": [{"key": "v", "type": "from_step", "fromStep": 1}]},
        )
        validate_blocks(blocks)

    @pytest.mark.parametrize("from_step", [0, 1, 5, -1])
    def test_self_forward_or_negative_reference_rejected(self, make_blocks, from_step):
        # Arrange
        blocks = make_blocks(
            {"id": "a", "variables": [{"key": "v", "type": "from_step", "fromStep": from_step}]},
            {"id": "b"},
        )

        # Act & Assert
        with pytest.raises(InvalidVariableReference) as exc_info:
            validate_blocks(blocks)
        assert exc_info.value.context["from_step"] == from_step
        assert exc_info.value.context["block_index"] == 0

    def test_duplicate_variable_key_rejected(self, make_blocks):
        blocks = make_blocks(
            {
                "id": "a",
                "variables": [
                    {"key": "amount", "type": "preset", "value": "1"},
                    {"key": "amount", "type": "capture"},
                ],
            }
        )
        with pytest.raises(DuplicateVariableError, match="amount"):
            validate_blocks(blocks)

    def test_capture_variables_are_not_evaluated(self, make_blocks):
        """A capture with no value is valid input."""
        blocks = make_blocks({"id": "a", "variables": [{"key": "price", "type": "capture"}]})
        validate_blocks(blocks)


class TestIterations:
    def test_positive_count_passes(self, loop_flow):
        validate_blocks(loop_flow)

    @pytest.mark.parametrize("iterations", [0, -3, 2.5, True])
    def test_bad_count_rejected(self, make_blocks, iterations):
        # Arrange
        blocks = make_blocks({"id": "loop", "nodeType": "for", "iterations": iterations})

        # Act & Assert
        with pytest.raises(InvalidIterationCount) as exc_info:
            validate_blocks(blocks)
        assert exc_info.value.context["block_id"] == "loop"

    def test_while_has_no_count(self, make_blocks):
        validate_blocks(make_blocks({"id": "poll", "nodeType": "while", "condition": "x"}))


class TestBranchResolution:
    @pytest.fixture
    def branching(self, make_blocks):
        return make_blocks(
            {"id": "a"},
            {
                "id": "gate",
                "nodeType": "conditional",
                "paths": {"yes": {"blocks": ["a", "ext-1"]}, "no": {"blocks": ["ext-2"]}},
            },
        )

    def test_branch_ids_opaque_by_default(self, branching):
        validate_blocks(branching)

    def test_enforced_resolution_rejects_unknown_ids(self, branching):
        # Arrange
        settings = EnumerationSettings(enforce_branch_resolution=True, branch_catalogue=["ext-1"])

        # Act & Assert
        with pytest.raises(DanglingBranchReference, match="ext-2") as exc_info:
            validate_blocks(branching, settings)
        assert exc_info.value.context["block_id"] == "gate"

    def test_enforced_resolution_accepts_catalogued_ids(self, branching):
        settings = EnumerationSettings(
            enforce_branch_resolution=True, branch_catalogue=["ext-1", "ext-2"]
        )
        validate_blocks(branching, settings)

    def test_enforced_resolution_accepts_own_placeholders(self, make_blocks):
        """Branch lists may name the ids synthesized for their own block."""
        # Arrange
        blocks = make_blocks(
            {"id": "A"},
            {
                "id": "B",
                "nodeType": "conditional",
                "paths": {"yes": {"blocks": ["B-yes-1", "B-yes-2"]}, "no": {"blocks": ["B-no-1"]}},
            },
        )
        settings = EnumerationSettings(enforce_branch_resolution=True)

        # Act & Assert
        validate_blocks(blocks, settings)

    def test_enforced_resolution_accepts_loop_iteration_ids(self, make_blocks):
        blocks = make_blocks(
            {"id": "L", "nodeType": "while"},
            {"id": "B", "nodeType": "conditional", "paths": {"yes": {"blocks": ["L-iter-3"]}}},
        )
        validate_blocks(blocks, EnumerationSettings(enforce_branch_resolution=True))

    def test_enforced_resolution_rejects_placeholders_beyond_fixed_count(self, make_blocks):
        blocks = make_blocks(
            {"id": "B", "nodeType": "conditional", "paths": {"no": {"blocks": ["B-no-2"]}}},
        )
        with pytest.raises(DanglingBranchReference, match="B-no-2"):
            validate_blocks(blocks, EnumerationSettings(enforce_branch_resolution=True))


class TestPlaceholderIds:
    @pytest.mark.parametrize("block_id", ["B-yes-1", "B-yes-2", "B-no-1"])
    def test_block_reusing_branch_placeholder_rejected(self, make_blocks, block_id):
        # Arrange
        blocks = make_blocks({"id": "B", "nodeType": "conditional"}, {"id": block_id})

        # Act & Assert
        with pytest.raises(PlaceholderCollisionError) as exc_info:
            validate_blocks(blocks)
        assert exc_info.value.context == {"block_id": block_id, "owner": "B"}

    def test_block_reusing_iteration_id_rejected_even_before_loop(self, make_blocks):
        blocks = make_blocks({"id": "L-iter-2"}, {"id": "L", "nodeType": "for", "iterations": 2})
        with pytest.raises(PlaceholderCollisionError, match="L-iter-2"):
            validate_blocks(blocks)

    def test_lookalike_ids_outside_fixed_counts_pass(self, make_blocks):
        validate_blocks(
            make_blocks({"id": "B", "nodeType": "conditional"}, {"id": "B-yes-3"}, {"id": "B-no-2"})
        )


def test_rejection_is_logged(make_blocks, caplog):
    # Arrange
    blocks = make_blocks({"id": "loop", "nodeType": "for", "iterations": 0})

    # Act
    with caplog.at_level(logging.WARNING, logger="flowplan"):
        with pytest.raises(InvalidIterationCount):
            validate_blocks(blocks)

    # Assert
    assert "Flow rejected" in caplog.text
