"""Result types shared by the topological sort algorithms."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Algorithm(Enum):
    """Topological sort algorithm selector."""

    DFS = "dfs"
    SOURCE_REMOVAL = "source-removal"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.DFS: "DFS-based topological sort",
    Algorithm.SOURCE_REMOVAL: "Source removal (Kahn's algorithm)",
}


@dataclass(frozen=True)
class SortStats:
    """Instrumentation counters reported by a single sort run.

    Attributes:
        comparisons: Edge or matrix-cell examinations
        operations: Visits, finishes, queue and in-degree updates
        vertices: Number of vertices in the sorted graph
        edges: Number of edges in the sorted graph
    """

    comparisons: int
    operations: int
    vertices: int
    edges: int


@dataclass(frozen=True)
class SortResult:
    """Topological order produced by one algorithm run, with its counters."""

    order: tuple[int, ...]
    stats: SortStats

    def to_dict(self) -> dict[str, Any]:
        return {"order": list(self.order), "stats": asdict(self.stats)}
