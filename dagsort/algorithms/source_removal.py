"""Source-removal topological sort (Kahn's algorithm).

In-degrees are computed with a dense O(V^2) scan of the adjacency matrix,
not the adjacency list. Matrix cells hold edge multiplicities, so repeated
edges raise the in-degree once per copy.
"""

from collections import deque

from dagsort.algorithms.base import SortResult, SortStats
from dagsort.errors import IncompleteOrderError
from dagsort.graph.graph import Graph
from dagsort.log_config import get_logger

logger = get_logger(__name__)


def source_removal_sort(graph: Graph) -> SortResult:
    """Sort ``graph`` topologically by repeatedly removing sources.

    Counters:
        comparisons: one per matrix cell scanned, one per vertex checked for
            in-degree zero, one per in-degree decrement examined
        operations: one per in-degree increment, one per enqueue, two per
            dequeue-and-append, one per decrement

    Args:
        graph: Graph to sort

    Returns:
        SortResult holding the removal order

    Raises:
        IncompleteOrderError: If the queue drains before every vertex is ordered
    """
    size = graph.size
    matrix = graph.matrix
    adjacency = graph.adjacency_list
    in_degree = [0] * size
    queue: deque[int] = deque()
    result: list[int] = []
    comparisons = 0
    operations = 0

    # Calculate in-degrees
    for i in range(size):
        row = matrix[i]
        for j in range(size):
            comparisons += 1
            if row[j]:
                in_degree[j] += row[j]
                operations += 1

    # Find initial sources
    for vertex in range(size):
        comparisons += 1
        if in_degree[vertex] == 0:
            queue.append(vertex)
            operations += 1

    while queue:
        vertex = queue.popleft()
        result.append(vertex)
        operations += 2

        for neighbor in adjacency[vertex]:
            comparisons += 1
            in_degree[neighbor] -= 1
            operations += 1
            if in_degree[neighbor] == 0:
                queue.append(neighbor)
                operations += 1

    if len(result) != size:
        placed = set(result)
        remaining = [v for v in range(size) if v not in placed]
        msg = (
            f"Not all vertices included in the sort ({len(result)} of {size}). "
            "Graph may have a cycle."
        )
        logger.error("incomplete_topological_order", ordered=len(result), remaining=remaining)
        raise IncompleteOrderError(msg, remaining)

    return SortResult(
        order=tuple(result),
        stats=SortStats(
            comparisons=comparisons,
            operations=operations,
            vertices=size,
            edges=graph.edge_count,
        ),
    )
