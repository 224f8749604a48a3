"""Topological sort algorithms and their shared result types."""

from collections.abc import Callable

from dagsort.algorithms.base import Algorithm, SortResult, SortStats
from dagsort.algorithms.dfs import dfs_topological_sort
from dagsort.algorithms.source_removal import source_removal_sort
from dagsort.algorithms.sources import SourceLookup, find_source_list, find_source_matrix
from dagsort.graph.graph import Graph

SORTERS: dict[Algorithm, Callable[[Graph], SortResult]] = {
    Algorithm.DFS: dfs_topological_sort,
    Algorithm.SOURCE_REMOVAL: source_removal_sort,
}


def get_sorter(algorithm: Algorithm | str) -> Callable[[Graph], SortResult]:
    """Return the sort function for an Algorithm member or its value.

    Raises:
        ValueError: If ``algorithm`` names no known algorithm
    """
    return SORTERS[Algorithm(algorithm)]


__all__ = [
    "SORTERS",
    "Algorithm",
    "SortResult",
    "SortStats",
    "SourceLookup",
    "dfs_topological_sort",
    "find_source_list",
    "find_source_matrix",
    "get_sorter",
    "source_removal_sort",
]
