"""Error taxonomy for graph construction and sorting.

Every failure in this package stems from invalid structural input, so all
errors are terminal for the operation that raised them. The boundary layer
inspects ``kind`` to discriminate between them and ``message`` to render a
human-readable explanation.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Discriminated kind of a graph error."""

    INVALID_VERTEX_COUNT = "InvalidVertexCount"
    INVALID_EDGE_FORMAT = "InvalidEdgeFormat"
    VERTEX_OUT_OF_RANGE = "VertexOutOfRange"
    SELF_LOOP_DETECTED = "SelfLoopDetected"
    CYCLE_DETECTED = "CycleDetected"
    INCOMPLETE_ORDER = "IncompleteOrder"


class GraphError(Exception):
    """Base class for all errors raised while building or sorting a graph."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Return the error as a ``{"kind", "message"}`` mapping."""
        return {"kind": self.kind.value, "message": self.message}


class InvalidVertexCountError(GraphError):
    """Raised when the vertex count is not a positive integer."""

    kind = ErrorKind.INVALID_VERTEX_COUNT


class InvalidEdgeFormatError(GraphError):
    """Raised when the edge collection or one of its edges is malformed."""

    kind = ErrorKind.INVALID_EDGE_FORMAT


class VertexOutOfRangeError(GraphError):
    """Raised when an edge references a vertex outside ``[0, vertices - 1]``."""

    kind = ErrorKind.VERTEX_OUT_OF_RANGE

    def __init__(self, message: str, edge: tuple[int, int]):
        super().__init__(message)
        self.edge = edge


class SelfLoopDetectedError(GraphError):
    """Raised when an edge starts and ends at the same vertex."""

    kind = ErrorKind.SELF_LOOP_DETECTED

    def __init__(self, message: str, vertex: int):
        super().__init__(message)
        self.vertex = vertex


class CycleDetectedError(GraphError):
    """Exception raised when the accepted edges form a directed cycle.

    A cycle means that no topological order exists for the graph.

    Attributes:
        cycle: Closed vertex path of one detected cycle (first == last)
    """

    kind = ErrorKind.CYCLE_DETECTED

    def __init__(self, message: str, cycle: list[int] | None = None):
        super().__init__(message)
        self.cycle = cycle or []


class IncompleteOrderError(GraphError):
    """Raised when source removal cannot order every vertex.

    Attributes:
        remaining: Vertices left out of the produced order
    """

    kind = ErrorKind.INCOMPLETE_ORDER

    def __init__(self, message: str, remaining: list[int]):
        super().__init__(message)
        self.remaining = remaining
