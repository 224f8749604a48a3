"""Benchmark harness for the topological sort algorithms.

This module runs one algorithm against one Graph a fixed number of times:
untimed warmup iterations first, then timed iterations whose wall-clock
durations are summarized as median, average, min and max. Only the sort call
itself sits inside the timed region.
"""

import statistics
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from dagsort.algorithms import Algorithm, SortResult, get_sorter
from dagsort.config import BenchmarkConfig
from dagsort.graph.graph import Graph
from dagsort.log_config import bind_context, get_logger, unbind_context

logger = get_logger(__name__)


@dataclass(frozen=True)
class TimingStats:
    """Summary of timed iteration durations, in milliseconds.

    Attributes:
        median: Value at index ``len // 2`` of the ascending samples
        average: Arithmetic mean of the samples
        min: Fastest sample
        max: Slowest sample
    """

    median: float
    average: float
    min: float
    max: float

    @classmethod
    def from_samples(cls, samples: list[float]) -> "TimingStats":
        """Summarize raw durations.

        For an even number of samples the median is the upper of the two
        middle values, not their mean.

        Raises:
            ValueError: If ``samples`` is empty
        """
        if not samples:
            msg = "Cannot summarize an empty sample list"
            raise ValueError(msg)

        ordered = sorted(samples)
        return cls(
            median=ordered[len(ordered) // 2],
            average=statistics.fmean(ordered),
            min=ordered[0],
            max=ordered[-1],
        )


@dataclass(frozen=True)
class BenchmarkResult:
    """A SortResult together with the timing of the runs that produced it.

    Attributes:
        algorithm: Algorithm that was benchmarked
        result: SortResult of the final timed iteration
        timing: Summary of the timed iteration durations
        warmup_iterations: Number of untimed runs executed first
        samples: Timed durations in milliseconds, ascending
    """

    algorithm: Algorithm
    result: SortResult
    timing: TimingStats
    warmup_iterations: int
    samples: tuple[float, ...] = field(default=())

    @property
    def order(self) -> tuple[int, ...]:
        return self.result.order

    @property
    def timed_iterations(self) -> int:
        return len(self.samples)

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm.value,
            **self.result.to_dict(),
            "timing": {
                "median": self.timing.median,
                "average": self.timing.average,
                "min": self.timing.min,
                "max": self.timing.max,
            },
            "warmup_iterations": self.warmup_iterations,
            "timed_iterations": self.timed_iterations,
        }


def run_benchmark(
    graph: Graph,
    algorithm: Algorithm | str,
    config: BenchmarkConfig | None = None,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchmarkResult:
    """Benchmark one algorithm on one graph.

    Args:
        graph: Graph to sort
        algorithm: Algorithm member or its value ("dfs", "source-removal")
        config: Iteration counts; defaults to 3 warmup and 10 timed runs
        clock: Monotonic clock returning seconds

    Returns:
        BenchmarkResult with the final timed run's order and stats

    Raises:
        GraphError: Propagated unchanged from the sort
        RuntimeError: If two timed runs disagree on order or stats
    """
    algorithm = Algorithm(algorithm)
    config = config or BenchmarkConfig()
    sort = get_sorter(algorithm)

    bind_context(algorithm=algorithm.value)
    try:
        logger.info(
            "benchmark_started",
            vertices=graph.size,
            edges=graph.edge_count,
            warmup_iterations=config.warmup_iterations,
            timed_iterations=config.timed_iterations,
        )

        for _ in range(config.warmup_iterations):
            sort(graph)

        samples: list[float] = []
        first: SortResult | None = None
        last: SortResult | None = None
        for _ in range(config.timed_iterations):
            start = clock()
            last = sort(graph)
            end = clock()
            samples.append((end - start) * 1000)

            if first is None:
                first = last
            elif last != first:
                msg = f"{algorithm.value} produced different results on an unchanged graph"
                logger.error("nondeterministic_sort", first=first.to_dict(), last=last.to_dict())
                raise RuntimeError(msg)

        timing = TimingStats.from_samples(samples)

        logger.info(
            "benchmark_finished",
            median_ms=timing.median,
            average_ms=timing.average,
            min_ms=timing.min,
            max_ms=timing.max,
            comparisons=last.stats.comparisons,
            operations=last.stats.operations,
        )
    finally:
        unbind_context("algorithm")

    return BenchmarkResult(
        algorithm=algorithm,
        result=last,
        timing=timing,
        warmup_iterations=config.warmup_iterations,
        samples=tuple(sorted(samples)),
    )


def compare_algorithms(
    graph: Graph,
    config: BenchmarkConfig | None = None,
    algorithms: list[Algorithm] | None = None,
) -> dict[Algorithm, BenchmarkResult]:
    """Benchmark several algorithms on the same graph, in the given order.

    Args:
        graph: Graph to sort
        config: Iteration counts shared by every algorithm
        algorithms: Algorithms to run; defaults to all, in declaration order

    Returns:
        Mapping from algorithm to its BenchmarkResult, in run order
    """
    return {
        algorithm: run_benchmark(graph, algorithm, config)
        for algorithm in (algorithms or list(Algorithm))
    }
