"""Depth-first-search topological sort.

Vertices are emitted in reverse postorder: a vertex is placed in front of the
result once every vertex reachable from it has been placed. Top-level
traversals start from unvisited vertices in increasing index order and
successors are followed in adjacency-list order, so the result is fully
determined by the graph's edge input order.
"""

from dagsort.algorithms.base import SortResult, SortStats
from dagsort.graph.graph import Graph


def dfs_topological_sort(graph: Graph) -> SortResult:
    """Sort ``graph`` topologically with a postorder DFS.

    Counters:
        operations: one per vertex visit start, one per vertex finish
        comparisons: one per outgoing edge examined, visited or not

    Args:
        graph: Graph to sort

    Returns:
        SortResult holding the reverse-postorder sequence

    Example:
        >>> dfs_topological_sort(Graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])).order
        (0, 2, 1, 3)
    """
    adjacency = graph.adjacency_list
    visited = [False] * graph.size
    postorder: list[int] = []
    comparisons = 0
    operations = 0

    for root in range(graph.size):
        if visited[root]:
            continue

        visited[root] = True
        operations += 1
        # Frames are [vertex, index of the next successor to examine]
        stack: list[list[int]] = [[root, 0]]

        while stack:
            frame = stack[-1]
            vertex, index = frame
            successors = adjacency[vertex]

            if index < len(successors):
                frame[1] = index + 1
                neighbor = successors[index]
                comparisons += 1
                if not visited[neighbor]:
                    visited[neighbor] = True
                    operations += 1
                    stack.append([neighbor, 0])
                continue

            stack.pop()
            postorder.append(vertex)
            operations += 1

    postorder.reverse()

    return SortResult(
        order=tuple(postorder),
        stats=SortStats(
            comparisons=comparisons,
            operations=operations,
            vertices=graph.size,
            edges=graph.edge_count,
        ),
    )
