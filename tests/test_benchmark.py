"""Unit tests for the benchmark harness.

Tests cover:
- Timing statistics (median rule, average, min, max)
- Warmup and timed iteration counts
- Result and stats taken from the final timed run
- Determinism across runs
- Comparing algorithms on one graph
"""

import pytest

from dagsort.algorithms import SORTERS, Algorithm, dfs_topological_sort
from dagsort.algorithms.base import SortResult, SortStats
from dagsort.benchmark import BenchmarkResult, TimingStats, compare_algorithms, run_benchmark
from dagsort.config import BenchmarkConfig
from dagsort.errors import IncompleteOrderError
from dagsort.graph.graph import Graph

# Durations in milliseconds handed out by the fake clock, one per timed run
DURATIONS_MS = [5.0, 1.0, 4.0, 2.0, 3.0, 10.0, 9.0, 8.0, 7.0, 6.0]
DEFAULT_WARMUP = 3
DEFAULT_RUNS = 10


def make_clock(durations_ms: list[float]):
    """Build a fake clock whose consecutive start/end pairs span the given durations."""
    ticks = []
    now = 0.0
    for duration in durations_ms:
        ticks.extend([now, now + duration / 1000])
        now += 1.0
    iterator = iter(ticks)
    return lambda: next(iterator)


class TestTimingStats:
    """Test summarizing raw durations."""

    def test_even_count_median_is_upper_middle(self):
        """Test that the median is not interpolated for an even sample count."""
        stats = TimingStats.from_samples([4.0, 1.0, 3.0, 2.0])

        assert stats.median == 3.0
        assert stats.average == 2.5
        assert stats.min == 1.0
        assert stats.max == 4.0

    def test_odd_count_median(self):
        """Test the middle value for an odd sample count."""
        assert TimingStats.from_samples([9.0, 1.0, 5.0]).median == 5.0

    def test_single_sample(self):
        """Test that one sample is its own median, average, min and max."""
        stats = TimingStats.from_samples([0.25])

        assert stats == TimingStats(median=0.25, average=0.25, min=0.25, max=0.25)

    def test_empty_samples(self):
        """Test that summarizing nothing is an error."""
        with pytest.raises(ValueError, match="empty"):
            TimingStats.from_samples([])


class TestRunBenchmark:
    """Test running one algorithm on one graph."""

    def test_timing_from_fake_clock(self, diamond_graph):
        """Test median/average/min/max over the ten timed durations."""
        result = run_benchmark(diamond_graph, Algorithm.DFS, clock=make_clock(DURATIONS_MS))

        assert result.timing.median == pytest.approx(6.0)
        assert result.timing.average == pytest.approx(5.5)
        assert result.timing.min == pytest.approx(1.0)
        assert result.timing.max == pytest.approx(10.0)
        assert list(result.samples) == pytest.approx(sorted(DURATIONS_MS))

    def test_default_iteration_counts(self, diamond_graph, monkeypatch):
        """Test three warmup runs followed by ten timed runs."""
        calls = []

        def counting_sort(graph):
            calls.append(graph)
            return dfs_topological_sort(graph)

        monkeypatch.setitem(SORTERS, Algorithm.DFS, counting_sort)
        clock_calls = []

        def clock():
            clock_calls.append(None)
            return float(len(clock_calls))

        result = run_benchmark(diamond_graph, Algorithm.DFS, clock=clock)

        assert len(calls) == DEFAULT_WARMUP + DEFAULT_RUNS
        assert len(clock_calls) == 2 * DEFAULT_RUNS
        assert result.warmup_iterations == DEFAULT_WARMUP
        assert result.timed_iterations == DEFAULT_RUNS

    def test_configured_iteration_counts(self, diamond_graph, monkeypatch):
        """Test that BenchmarkConfig overrides the iteration counts."""
        calls = []

        def counting_sort(graph):
            calls.append(graph)
            return dfs_topological_sort(graph)

        monkeypatch.setitem(SORTERS, Algorithm.DFS, counting_sort)
        config = BenchmarkConfig(warmup_iterations=0, timed_iterations=2)

        result = run_benchmark(diamond_graph, "dfs", config)

        assert len(calls) == 2
        assert result.timed_iterations == 2

    def test_result_and_stats_reported(self, diamond_graph):
        """Test that the order and stats are those of the sort."""
        result = run_benchmark(diamond_graph, Algorithm.SOURCE_REMOVAL)

        assert isinstance(result, BenchmarkResult)
        assert result.algorithm is Algorithm.SOURCE_REMOVAL
        assert result.order == (0, 1, 2, 3)
        assert result.result.stats == SortStats(
            comparisons=24, operations=20, vertices=4, edges=4,
        )

    def test_accepts_algorithm_value(self, diamond_graph):
        """Test selecting the algorithm by its string value."""
        assert run_benchmark(diamond_graph, "source-removal").algorithm is Algorithm.SOURCE_REMOVAL

    def test_unknown_algorithm(self, diamond_graph):
        """Test that an unknown algorithm name is rejected."""
        with pytest.raises(ValueError, match="not a valid Algorithm"):
            run_benchmark(diamond_graph, "quicksort")

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_timing_invariants(self, random_dag, algorithm):
        """Test min <= median <= max, min <= average <= max, all non-negative."""
        for seed in range(5):
            graph = Graph(*random_dag(seed))
            timing = run_benchmark(graph, algorithm).timing

            assert 0 <= timing.min <= timing.median <= timing.max
            assert timing.min <= timing.average <= timing.max

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_repeated_benchmarks_identical(self, diamond_graph, algorithm):
        """Test that separate benchmark runs report identical order and stats."""
        first = run_benchmark(diamond_graph, algorithm)
        second = run_benchmark(diamond_graph, algorithm)

        assert first.result == second.result

    def test_nondeterministic_sort_rejected(self, diamond_graph, monkeypatch):
        """Test that timed runs disagreeing with each other raise."""
        counter = iter(range(100))

        def drifting_sort(graph):
            stats = SortStats(comparisons=next(counter), operations=0, vertices=4, edges=4)
            return SortResult(order=(0, 1, 2, 3), stats=stats)

        monkeypatch.setitem(SORTERS, Algorithm.DFS, drifting_sort)

        with pytest.raises(RuntimeError, match="different results"):
            run_benchmark(diamond_graph, Algorithm.DFS)

    def test_sort_errors_propagate(self, diamond_graph, monkeypatch):
        """Test that a sort failure aborts the benchmark unchanged."""

        def failing_sort(graph):
            raise IncompleteOrderError("Not all vertices included", [3])

        monkeypatch.setitem(SORTERS, Algorithm.SOURCE_REMOVAL, failing_sort)

        with pytest.raises(IncompleteOrderError):
            run_benchmark(diamond_graph, Algorithm.SOURCE_REMOVAL)

    def test_to_dict(self, single_vertex_graph):
        """Test the serializable form of a benchmark."""
        data = run_benchmark(single_vertex_graph, Algorithm.DFS).to_dict()

        assert data["algorithm"] == "dfs"
        assert data["order"] == [0]
        assert data["stats"]["vertices"] == 1
        assert set(data["timing"]) == {"median", "average", "min", "max"}
        assert data["warmup_iterations"] == DEFAULT_WARMUP
        assert data["timed_iterations"] == DEFAULT_RUNS


class TestCompareAlgorithms:
    """Test benchmarking every algorithm on one graph."""

    def test_runs_all_algorithms_in_order(self, diamond_graph):
        """Test that DFS runs first, then source removal."""
        results = compare_algorithms(diamond_graph)

        assert list(results) == [Algorithm.DFS, Algorithm.SOURCE_REMOVAL]
        assert results[Algorithm.DFS].order == (0, 2, 1, 3)
        assert results[Algorithm.SOURCE_REMOVAL].order == (0, 1, 2, 3)

    def test_subset_of_algorithms(self, single_vertex_graph):
        """Test restricting the comparison to one algorithm."""
        results = compare_algorithms(
            single_vertex_graph,
            BenchmarkConfig(timed_iterations=1),
            [Algorithm.SOURCE_REMOVAL],
        )

        assert list(results) == [Algorithm.SOURCE_REMOVAL]
        assert results[Algorithm.SOURCE_REMOVAL].order == (0,)
