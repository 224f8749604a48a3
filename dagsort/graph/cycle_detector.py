"""Cycle detection for integer-indexed directed graphs.

This module provides the CycleDetector class, a three-coloring depth-first
search that tracks both the set of visited vertices and the vertices on the
active traversal path. The traversal uses an explicit stack of
``(vertex, next_successor_index)`` frames so that deep graphs never hit the
interpreter recursion limit, while visiting vertices in exactly the order the
recursive formulation would.
"""

from collections.abc import Sequence

from dagsort.log_config import get_logger

logger = get_logger(__name__)


class CycleDetector:
    """Detect directed cycles in an adjacency list.

    Example:
        >>> CycleDetector([[1], [2], []]).has_cycle()
        False
        >>> CycleDetector([[1], [2], [0]]).find_cycle()
        [0, 1, 2, 0]
    """

    def __init__(self, adjacency_list: Sequence[Sequence[int]]):
        """Initialize the detector.

        Args:
            adjacency_list: Successor lists indexed by vertex id; every
                successor must be a valid index into the list
        """
        self._adjacency = adjacency_list
        self._size = len(adjacency_list)
        self._visited: list[bool] = [False] * self._size
        self._on_stack: list[bool] = [False] * self._size
        self._path: list[int] = []
        self.visited_count = 0

    def has_cycle(self) -> bool:
        """Return True iff any directed cycle exists anywhere in the graph."""
        return self.find_cycle() is not None

    def find_cycle(self) -> list[int] | None:
        """Search the whole graph for a back edge.

        Top-level traversals start from every unvisited vertex in increasing
        index order, so disconnected components are all covered.

        Returns:
            Closed path ``[a, ..., a]`` of the first cycle found, or None
        """
        self._visited = [False] * self._size
        self._on_stack = [False] * self._size
        self._path = []
        self.visited_count = 0

        for vertex in range(self._size):
            if not self._visited[vertex]:
                cycle = self._dfs_cycle_detect(vertex)
                if cycle:
                    logger.debug("cycle_found", cycle=cycle)
                    return cycle

        logger.debug("graph_is_acyclic", vertices=self._size, visited=self.visited_count)
        return None

    def _enter(self, vertex: int) -> None:
        self._visited[vertex] = True
        self._on_stack[vertex] = True
        self._path.append(vertex)
        self.visited_count += 1

    def _dfs_cycle_detect(self, start: int) -> list[int] | None:
        """Iterative DFS from ``start`` that returns the cycle path on a back edge."""
        self._enter(start)
        stack: list[list[int]] = [[start, 0]]

        while stack:
            frame = stack[-1]
            vertex, index = frame
            successors = self._adjacency[vertex]

            if index < len(successors):
                frame[1] = index + 1
                successor = successors[index]
                if not self._visited[successor]:
                    self._enter(successor)
                    stack.append([successor, 0])
                elif self._on_stack[successor]:
                    cycle_start_idx = self._path.index(successor)
                    return [*self._path[cycle_start_idx:], successor]
                continue

            # Backtrack
            stack.pop()
            self._on_stack[vertex] = False
            self._path.pop()

        return None
