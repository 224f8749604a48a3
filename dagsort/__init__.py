"""Topological sorting of DAGs with two instrumented algorithms.

Build a validated, immutable Graph and benchmark either algorithm on it:

    >>> from dagsort import Algorithm, construct_graph, run_benchmark
    >>> graph = construct_graph(4, [(0, 1), (0, 2), (1, 3), (2, 3)])
    >>> run_benchmark(graph, Algorithm.DFS).order
    (0, 2, 1, 3)
"""

from dagsort.algorithms import (
    Algorithm,
    SortResult,
    SortStats,
    dfs_topological_sort,
    source_removal_sort,
)
from dagsort.benchmark import BenchmarkResult, TimingStats, compare_algorithms, run_benchmark
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
from dagsort.graph import Graph, GraphValidator, ValidationReport, construct_graph

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "BenchmarkResult",
    "CycleDetectedError",
    "ErrorKind",
    "Graph",
    "GraphError",
    "GraphValidator",
    "IncompleteOrderError",
    "InvalidEdgeFormatError",
    "InvalidVertexCountError",
    "SelfLoopDetectedError",
    "SortResult",
    "SortStats",
    "TimingStats",
    "ValidationReport",
    "VertexOutOfRangeError",
    "compare_algorithms",
    "construct_graph",
    "dfs_topological_sort",
    "run_benchmark",
    "source_removal_sort",
]
