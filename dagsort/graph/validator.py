"""Structural validation of raw graph input.

This module provides the checks applied while a Graph is constructed
(vertex count, edge format, vertex range, self-loops) and a non-raising
``inspect`` pass that collects every problem in the input into a
ValidationReport, including the path of a detected cycle.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from dagsort.errors import (
    CycleDetectedError,
    ErrorKind,
    GraphError,
    InvalidEdgeFormatError,
    InvalidVertexCountError,
    SelfLoopDetectedError,
    VertexOutOfRangeError,
)
from dagsort.graph.cycle_detector import CycleDetector
from dagsort.log_config import get_logger

logger = get_logger(__name__)

EDGE_ARITY = 2


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class ValidationReport:
    """Report containing validation results for raw graph input.

    Attributes:
        is_valid: Whether the input passed all validation checks
        errors: List of (kind, message) pairs for critical issues
        warnings: List of warning messages (accepted but suspicious input)
        cycles: Detected cycles, each a closed list of vertex ids
        duplicate_edges: Edges given more than once, in first-repeat order
    """

    is_valid: bool = True
    errors: list[tuple[ErrorKind, str]] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    cycles: list[list[int]] = field(default_factory=list)
    duplicate_edges: list[tuple[int, int]] = field(default_factory=list)

    def add_error(self, error: GraphError) -> None:
        """Record an error and mark validation as failed."""
        self.errors.append((error.kind, error.message))
        self.is_valid = False
        logger.error("validation_error", kind=error.kind.value, message=error.message)

    def add_warning(self, message: str) -> None:
        """Add a warning message without failing validation."""
        self.warnings.append(message)
        logger.warning("validation_warning", message=message)

    @property
    def error_kinds(self) -> list[ErrorKind]:
        return [kind for kind, _ in self.errors]

    def summary(self) -> str:
        """Generate a human-readable summary of the validation report."""
        lines = []
        lines.append(f"Validation Status: {'PASS' if self.is_valid else 'FAIL'}")
        lines.append(f"Errors: {len(self.errors)}")
        lines.append(f"Warnings: {len(self.warnings)}")
        lines.append(f"Cycles: {len(self.cycles)}")
        lines.append(f"Duplicate Edges: {len(self.duplicate_edges)}")

        if self.errors:
            lines.append("\nErrors:")
            lines.extend(f"  - [{kind.value}] {message}" for kind, message in self.errors)

        if self.warnings:
            lines.append("\nWarnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)

        if self.cycles:
            lines.append("\nCycles Detected:")
            for i, cycle in enumerate(self.cycles, 1):
                cycle_path = " -> ".join(str(v) for v in cycle)
                lines.append(f"  {i}. {cycle_path}")

        return "\n".join(lines)


class GraphValidator:
    """Validator for a vertex count and an edge list.

    The ``validate_*`` methods raise on the first problem and are what Graph
    construction uses. ``inspect`` runs the same checks without raising and
    reports every problem it finds.
    """

    def validate_vertex_count(self, vertices: Any) -> int:
        """Check that ``vertices`` is a positive integer.

        Raises:
            InvalidVertexCountError: If it is not
        """
        if not _is_int(vertices) or vertices < 1:
            msg = f"Number of vertices must be a positive integer, got {vertices!r}"
            raise InvalidVertexCountError(msg)
        return vertices

    def validate_edges(self, edges: Any) -> Sequence[Any]:
        """Check that the edge collection itself is a sequence.

        Raises:
            InvalidEdgeFormatError: If ``edges`` is not a list-like sequence
        """
        if not isinstance(edges, Sequence) or isinstance(edges, (str, bytes)):
            msg = f"Edges must be a sequence of (from, to) pairs, got {type(edges).__name__}"
            raise InvalidEdgeFormatError(msg)
        return edges

    def validate_edge(self, edge: Any, vertices: int) -> tuple[int, int]:
        """Check one edge: format, then range, then self-loop.

        Args:
            edge: Candidate ``(from, to)`` pair
            vertices: Number of vertices in the graph

        Returns:
            The edge as a ``(from, to)`` tuple

        Raises:
            InvalidEdgeFormatError: If the edge is not a pair of integers
            VertexOutOfRangeError: If an endpoint is outside ``[0, vertices - 1]``
            SelfLoopDetectedError: If both endpoints are equal
        """
        if (
            not isinstance(edge, (list, tuple))
            or len(edge) != EDGE_ARITY
            or not all(_is_int(v) for v in edge)
        ):
            msg = f"Each edge must be a pair of two integers, got {edge!r}"
            raise InvalidEdgeFormatError(msg)

        source, target = edge
        if not (0 <= source < vertices and 0 <= target < vertices):
            msg = (
                f"Invalid edge {source},{target}: "
                f"vertices must be between 0 and {vertices - 1}"
            )
            raise VertexOutOfRangeError(msg, (source, target))

        if source == target:
            msg = f"Self-loop detected at vertex {source}"
            raise SelfLoopDetectedError(msg, source)

        return source, target

    def inspect(self, vertices: Any, edges: Any) -> ValidationReport:
        """Validate raw input and generate a detailed report.

        Unlike construction, this keeps going after an invalid edge so that
        every malformed, out-of-range or self-looping edge is reported. The
        cycle check only runs when all edges were accepted.

        Args:
            vertices: Candidate vertex count
            edges: Candidate edge list

        Returns:
            ValidationReport containing all validation results
        """
        report = ValidationReport()

        try:
            vertex_count = self.validate_vertex_count(vertices)
            edge_list = self.validate_edges(edges)
        except GraphError as e:
            report.add_error(e)
            return report

        logger.info("starting_input_inspection", vertices=vertex_count, edges=len(edge_list))

        adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        seen: set[tuple[int, int]] = set()
        for edge in edge_list:
            try:
                source, target = self.validate_edge(edge, vertex_count)
            except GraphError as e:
                report.add_error(e)
                continue
            if (source, target) in seen:
                report.duplicate_edges.append((source, target))
                report.add_warning(f"Duplicate edge {source},{target}")
            seen.add((source, target))
            adjacency[source].append(target)

        touched = {v for pair in seen for v in pair}
        isolated = [v for v in range(vertex_count) if v not in touched]
        if isolated and vertex_count > 1:
            report.add_warning(
                f"Isolated vertices with no edges: {', '.join(str(v) for v in isolated)}",
            )

        if report.is_valid:
            cycle = CycleDetector(adjacency).find_cycle()
            if cycle:
                report.cycles.append(cycle)
                cycle_path = " -> ".join(str(v) for v in cycle)
                report.add_error(CycleDetectedError(f"Cycle detected: {cycle_path}", cycle))

        logger.info(
            "input_inspection_complete",
            is_valid=report.is_valid,
            error_count=len(report.errors),
            warning_count=len(report.warnings),
        )

        return report
