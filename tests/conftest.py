"""Shared fixtures for dagsort tests."""

import random

import pytest

from dagsort.graph.graph import Graph

DIAMOND_EDGES = [(0, 1), (0, 2), (1, 3), (2, 3)]
EDGE_PROBABILITY = 0.2


def _random_dag_input(seed: int, max_vertices: int = 30) -> tuple[int, list[tuple[int, int]]]:
    """Generate a random acyclic (vertices, edges) input.

    Edges only point forward along a shuffled vertex ranking, so the result
    never contains a cycle, but vertex ids are not already in sorted order.
    """
    rng = random.Random(seed)
    vertices = rng.randint(1, max_vertices)
    ranking = list(range(vertices))
    rng.shuffle(ranking)

    edges = []
    for i in range(vertices):
        for j in range(i + 1, vertices):
            if rng.random() < EDGE_PROBABILITY:
                edges.append((ranking[i], ranking[j]))
    rng.shuffle(edges)
    return vertices, edges


@pytest.fixture
def random_dag():
    """Fixture providing a seeded generator of random acyclic inputs."""
    return _random_dag_input


@pytest.fixture
def diamond_graph() -> Graph:
    """Fixture providing the four-vertex diamond 0 -> {1, 2} -> 3."""
    return Graph(4, DIAMOND_EDGES)


@pytest.fixture
def single_vertex_graph() -> Graph:
    """Fixture providing a graph with one vertex and no edges."""
    return Graph(1, [])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Fixture providing two chains plus an isolated vertex."""
    return Graph(6, [(4, 5), (0, 1), (1, 2)])
