"""Locate a source vertex (no incoming edges) with either representation.

Both lookups return the lowest-index source. They exist to contrast the cost
of the dense matrix scan with the adjacency-list scan on the same graph.
"""

import time
from dataclasses import dataclass

from dagsort.graph.graph import Graph


@dataclass(frozen=True)
class SourceLookup:
    """Source vertex found by a lookup and the time it took.

    Attributes:
        source: Lowest-index vertex with no incoming edge, or None
        elapsed_ms: Wall-clock duration of the lookup in milliseconds
    """

    source: int | None
    elapsed_ms: float


def find_source_matrix(graph: Graph) -> SourceLookup:
    """Find a source by scanning matrix columns, O(V^2)."""
    start = time.perf_counter()
    source = None

    for vertex in range(graph.size):
        if not any(graph.matrix[i][vertex] for i in range(graph.size)):
            source = vertex
            break

    elapsed_ms = (time.perf_counter() - start) * 1000
    return SourceLookup(source=source, elapsed_ms=elapsed_ms)


def find_source_list(graph: Graph) -> SourceLookup:
    """Find a source by marking edge targets from the adjacency list, O(V + E)."""
    start = time.perf_counter()
    has_incoming_edge = [False] * graph.size

    for successors in graph.adjacency_list:
        for neighbor in successors:
            has_incoming_edge[neighbor] = True

    source = next((v for v in range(graph.size) if not has_incoming_edge[v]), None)

    elapsed_ms = (time.perf_counter() - start) * 1000
    return SourceLookup(source=source, elapsed_ms=elapsed_ms)
