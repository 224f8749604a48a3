"""Immutable directed acyclic graph with matrix and list representations.

This module provides the Graph class, built once from a vertex count and an
edge list. Validation and cycle detection both happen during construction:
either a fully populated, acyclic Graph is returned or a GraphError is raised
and nothing is kept. After construction the graph is read-only, so it can be
shared freely between sorts and benchmark runs.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from dagsort.errors import CycleDetectedError, GraphError
from dagsort.graph.cycle_detector import CycleDetector
from dagsort.graph.validator import GraphValidator
from dagsort.log_config import get_logger

logger = get_logger(__name__)


class Graph:
    """Directed acyclic graph over vertices ``0..size-1``.

    Both representations are built together from the same edges:

    - ``matrix[i][j]`` holds how many times the edge ``i -> j`` was given
      (0 when absent), so a cell is truthy iff the edge exists
    - ``adjacency_list[i]`` holds the successors of ``i`` in edge input order,
      repeated edges included

    Thread-safety:
        Instances are immutable after ``__init__`` returns and may be read by
        any number of threads at once.

    Example:
        >>> graph = Graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])
        >>> graph.adjacency_list[0]
        (1, 2)
        >>> graph.edge_count
        4
    """

    __slots__ = ("_adjacency", "_edge_count", "_edges", "_frozen", "_matrix", "_size")

    def __init__(self, vertices: int, edges: Sequence[Sequence[int]]):
        """Build and validate the graph.

        Args:
            vertices: Number of vertices (positive integer)
            edges: Sequence of ``(from, to)`` integer pairs

        Raises:
            InvalidVertexCountError: If ``vertices`` is not a positive integer
            InvalidEdgeFormatError: If ``edges`` or one of its edges is malformed
            VertexOutOfRangeError: If an edge endpoint is out of range
            SelfLoopDetectedError: If an edge starts and ends at one vertex
            CycleDetectedError: If the edges form a directed cycle
        """
        validator = GraphValidator()

        try:
            size = validator.validate_vertex_count(vertices)
            edge_list = validator.validate_edges(edges)

            matrix = [[0] * size for _ in range(size)]
            adjacency: list[list[int]] = [[] for _ in range(size)]
            accepted: list[tuple[int, int]] = []

            for edge in edge_list:
                source, target = validator.validate_edge(edge, size)
                matrix[source][target] += 1
                adjacency[source].append(target)
                accepted.append((source, target))

            cycle = CycleDetector(adjacency).find_cycle()
            if cycle:
                cycle_path = " -> ".join(str(v) for v in cycle)
                msg = (
                    f"Graph contains a cycle ({cycle_path}). "
                    "Must be acyclic for topological sort."
                )
                raise CycleDetectedError(msg, cycle)
        except GraphError as e:
            logger.error("graph_construction_rejected", kind=e.kind.value, error=e.message)
            raise

        self._size = size
        self._matrix = tuple(tuple(row) for row in matrix)
        self._adjacency = tuple(tuple(successors) for successors in adjacency)
        self._edges = tuple(accepted)
        self._edge_count = len(accepted)
        self._frozen = True

        logger.info("graph_constructed", vertices=self._size, edges=self._edge_count)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            msg = f"Graph is immutable; cannot set {name!r}"
            raise AttributeError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        msg = f"Graph is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"Graph(size={self._size}, edge_count={self._edge_count})"

    @property
    def size(self) -> int:
        """Number of vertices."""
        return self._size

    @property
    def matrix(self) -> tuple[tuple[int, ...], ...]:
        """Dense ``size x size`` edge multiplicity table.

        Cells are not limited to 0 and 1: an edge given ``k`` times stores
        ``k``. Test ``matrix[i][j] > 0`` (or ``has_edge``) for presence.
        """
        return self._matrix

    @property
    def adjacency_list(self) -> tuple[tuple[int, ...], ...]:
        """Successors of each vertex, in edge input order."""
        return self._adjacency

    @property
    def edge_count(self) -> int:
        """Number of accepted edges, duplicates included."""
        return self._edge_count

    @property
    def edges(self) -> tuple[tuple[int, int], ...]:
        """Accepted edges in input order."""
        return self._edges

    def has_edge(self, source: int, target: int) -> bool:
        return self._matrix[source][target] > 0

    def successors(self, vertex: int) -> tuple[int, ...]:
        return self._adjacency[vertex]

    def is_topological_order(self, order: Iterable[int]) -> bool:
        """Check that ``order`` is a permutation of the vertices respecting every edge.

        Args:
            order: Candidate vertex sequence

        Returns:
            True if every vertex appears exactly once and, for each edge
            ``(u, v)``, ``u`` appears before ``v``
        """
        order = list(order)
        if sorted(order) != list(range(self._size)):
            return False

        position = {vertex: index for index, vertex in enumerate(order)}
        return all(position[source] < position[target] for source, target in self._edges)


def construct_graph(vertices: int, edges: Sequence[Sequence[int]]) -> Graph:
    """Build a validated, immutable Graph.

    Args:
        vertices: Number of vertices (positive integer)
        edges: Sequence of ``(from, to)`` integer pairs

    Returns:
        The constructed Graph

    Raises:
        GraphError: The subclass matching the first problem found
    """
    return Graph(vertices, edges)
