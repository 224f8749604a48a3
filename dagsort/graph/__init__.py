"""Graph module for validated DAG construction.

This module provides the immutable Graph model together with the input
validation and cycle detection that run while it is built.
"""

from dagsort.graph.cycle_detector import CycleDetector
from dagsort.graph.graph import Graph, construct_graph
from dagsort.graph.validator import GraphValidator, ValidationReport

__all__ = ["CycleDetector", "Graph", "GraphValidator", "ValidationReport", "construct_graph"]
