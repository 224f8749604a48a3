"""Unit tests for the error taxonomy."""

import pytest

from dagsort.errors import (
    CycleDetectedError,
    ErrorKind,
    GraphError,
    IncompleteOrderError,
    InvalidEdgeFormatError,
    InvalidVertexCountError,
    SelfLoopDetectedError,
    VertexOutOfRangeError,
)


class TestErrorKinds:
    """Test that every error carries its discriminating kind."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (InvalidVertexCountError("m"), "InvalidVertexCount"),
            (InvalidEdgeFormatError("m"), "InvalidEdgeFormat"),
            (VertexOutOfRangeError("m", (0, 9)), "VertexOutOfRange"),
            (SelfLoopDetectedError("m", 2), "SelfLoopDetected"),
            (CycleDetectedError("m", [0, 1, 0]), "CycleDetected"),
            (IncompleteOrderError("m", [1]), "IncompleteOrder"),
        ],
    )
    def test_kind_and_message(self, error, kind):
        """Test kind value, message and serialized form."""
        assert isinstance(error, GraphError)
        assert error.kind == ErrorKind(kind)
        assert error.message == "m"
        assert str(error) == "m"
        assert error.to_dict() == {"kind": kind, "message": "m"}

    def test_cycle_defaults_to_empty(self):
        """Test that a cycle error without a path has an empty cycle."""
        assert CycleDetectedError("m").cycle == []

    def test_kind_is_string_enum(self):
        """Test that kinds compare equal to their string names."""
        assert ErrorKind.CYCLE_DETECTED == "CycleDetected"
