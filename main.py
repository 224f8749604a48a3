#!/usr/bin/env python3
"""Main Entry Point and CLI Integration.

This module provides the command-line interface for dagsort. It parses the
vertex count and a ``from,to`` edge list, builds the graph, benchmarks the
selected algorithms and prints their topological order, timing and counters.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dagsort.algorithms import Algorithm, find_source_list, find_source_matrix
from dagsort.benchmark import BenchmarkResult, compare_algorithms
from dagsort.config import AppConfig, load_config
from dagsort.errors import GraphError, InvalidEdgeFormatError
from dagsort.graph.graph import Graph, construct_graph
from dagsort.log_config import clear_context, configure_logging, get_logger
from dagsort.parsing import parse_edge_list, parse_vertex_count

logger = get_logger(__name__)

INPUT_HINTS = (
    "Please ensure:\n"
    "1. Number of vertices is a positive integer\n"
    "2. Each edge is in format 'from,to'\n"
    "3. Vertex numbers are between 0 and (vertices-1)\n"
    "4. Graph is acyclic (no cycles)\n"
    "5. No self-loops (vertex to itself)"
)


def format_benchmark(benchmark: BenchmarkResult) -> list[str]:
    """Render one benchmark as the report lines shown to the user.

    Args:
        benchmark: Result to render

    Returns:
        Heading, order, timing and statistics lines
    """
    timing = benchmark.timing
    stats = benchmark.result.stats
    return [
        f"{benchmark.algorithm.label}:",
        f"  Topological order: {' → '.join(str(v) for v in benchmark.order)}",
        f"  Execution time (ms) - Median: {timing.median:.3f}, "
        f"Average: {timing.average:.3f}, "
        f"Min: {timing.min:.3f}, "
        f"Max: {timing.max:.3f}",
        f"  Statistics: {stats.vertices} vertices, {stats.edges} edges, "
        f"{stats.comparisons} comparisons, {stats.operations} operations",
    ]


def source_lookups(graph: Graph) -> dict[str, dict[str, Any]]:
    """Find a source vertex with both representations."""
    lookups = {"matrix": find_source_matrix(graph), "list": find_source_list(graph)}
    return {
        name: {"source": lookup.source, "elapsed_ms": lookup.elapsed_ms}
        for name, lookup in lookups.items()
    }


def read_edge_text(args: argparse.Namespace) -> str:
    """Return the raw edge list text from --edges, --edges-file or stdin.

    Raises:
        FileNotFoundError: If --edges-file does not exist
        OSError: If --edges-file cannot be read
        InvalidEdgeFormatError: If the edge text cannot be decoded
    """
    if args.edges_file:
        path = Path(args.edges_file)
        if not path.exists():
            msg = f"Edge list file not found: {path}"
            raise FileNotFoundError(msg)
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            msg = f"Edge list file {path} is not UTF-8 text: {e.reason} at byte {e.start}"
            raise InvalidEdgeFormatError(msg) from e
    if args.edges is not None:
        # Allow "0,1;0,2" and literal "\n" separators on a single command line
        return args.edges.replace("\\n", "\n").replace(";", "\n")
    try:
        return sys.stdin.read()
    except UnicodeDecodeError as e:
        msg = f"Standard input is not valid text: {e.reason} at byte {e.start}"
        raise InvalidEdgeFormatError(msg) from e


def resolve_config(args: argparse.Namespace) -> AppConfig:
    """Load the configuration and apply command-line overrides."""
    config = load_config(args.config)

    updates: dict[str, Any] = {}
    if args.log_level is not None:
        updates["logging_level"] = args.log_level
    if args.algorithm is not None:
        updates["algorithms"] = (
            list(Algorithm) if args.algorithm == "all" else [Algorithm(args.algorithm)]
        )
    if args.runs is not None or args.warmup is not None:
        updates["benchmark"] = {
            **config.benchmark.model_dump(),
            **{
                key: value
                for key, value in (
                    ("timed_iterations", args.runs),
                    ("warmup_iterations", args.warmup),
                )
                if value is not None
            },
        }

    if not updates:
        return config
    # Re-validate so command-line values obey the same constraints as file values
    return AppConfig.model_validate({**config.model_dump(), **updates})


def run(args: argparse.Namespace) -> int:
    """Build the graph, run the benchmarks and print the report.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    clear_context()
    # Configure logging before anything else logs; reconfigured once the config is known
    configure_logging(args.log_level or "WARNING")

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(config.logging_level, json_logs=config.json_logs)
    for warning in config.validate_config():
        logger.warning("configuration_warning", message=warning)

    try:
        vertices = parse_vertex_count(args.vertices)
        edges = parse_edge_list(read_edge_text(args))
        graph = construct_graph(vertices, edges)
        results = compare_algorithms(graph, config.benchmark, config.algorithms)
    except GraphError as e:
        if args.json:
            print(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            print(f"Error [{e.kind.value}]: {e.message}\n\n{INPUT_HINTS}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("edge_list_unreadable", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sources = source_lookups(graph) if args.find_source else None

    if args.json:
        payload: dict[str, Any] = {
            "vertices": graph.size,
            "edges": graph.edge_count,
            "results": [result.to_dict() for result in results.values()],
        }
        if sources is not None:
            payload["sources"] = sources
        print(json.dumps(payload, indent=2))
        return 0

    lines: list[str] = []
    for result in results.values():
        lines.extend(format_benchmark(result))
    if sources is not None:
        lines.append("Source lookup:")
        lines.extend(
            f"  {name}: vertex {lookup['source']} ({lookup['elapsed_ms']:.3f} ms)"
            for name, lookup in sources.items()
        )
    print("\n".join(lines))
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="dagsort - Topological sorting with DFS and source removal, benchmarked",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Four vertices, diamond shaped DAG
  python main.py -n 4 -e "0,1;0,2;1,3;2,3"

  # Edge list from a file, DFS only, JSON output
  python main.py -n 4 --edges-file edges.txt --algorithm dfs --json

  # Edge list from stdin with debug logging
  printf '0,1\\n1,2\\n' | python main.py -n 3 --debug
        """,
    )

    parser.add_argument(
        "-n",
        "--vertices",
        type=str,
        required=True,
        help="Number of vertices (positive integer)",
    )

    edge_source = parser.add_mutually_exclusive_group()
    edge_source.add_argument(
        "-e",
        "--edges",
        type=str,
        default=None,
        help="Edge list as 'from,to' pairs separated by ';' or newlines",
    )
    edge_source.add_argument(
        "--edges-file",
        type=str,
        default=None,
        help="Path to a file with one 'from,to' pair per line (default: read stdin)",
    )

    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm] + ["all"],
        default=None,
        help="Algorithm to benchmark (default: all, or as configured)",
    )

    parser.add_argument(
        "--runs",
        type=int,
        default=None,
        help="Number of timed iterations (default: 10)",
    )

    parser.add_argument(
        "--warmup",
        type=int,
        default=None,
        help="Number of untimed warmup iterations (default: 3)",
    )

    parser.add_argument(
        "--find-source",
        action="store_true",
        help="Also locate a source vertex with the matrix and list scans",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file (default: dagsort.yaml if present)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output (INFO level)",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug output (DEBUG level)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)

    # Handle verbose/debug flags
    if args.debug:
        args.log_level = "DEBUG"
    elif args.verbose:
        args.log_level = "INFO"

    return args


def main() -> None:
    """Main entry point for the dagsort CLI."""
    args = parse_args()

    try:
        exit_code = run(args)
    except KeyboardInterrupt:
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
