"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import random
from typing import Callable

import pytest

from graphpath import GraphStore


@pytest.fixture
def tree_graph() -> GraphStore:
    """Undirected, unweighted graph: 1-2, 1-3, 2-4, 3-5."""
    graph = GraphStore()
    for u, v in [(1, 2), (1, 3), (2, 4), (3, 5)]:
        graph.add_undirected_edge(u, v)
    return graph


@pytest.fixture
def weighted_graph() -> GraphStore:
    """Directed graph where A->C->B (cost 2) beats A->B (cost 4)."""
    graph = GraphStore()
    graph.add_edge("A", "B", 4)
    graph.add_edge("A", "C", 1)
    graph.add_edge("C", "B", 1)
    graph.add_edge("B", "D", 1)
    return graph


@pytest.fixture
def disconnected_graph() -> GraphStore:
    """Two components: A->B->C and X->Y, plus isolated Z."""
    graph = GraphStore()
    graph.add_edge("A", "B", 2)
    graph.add_edge("B", "C", 3)
    graph.add_edge("X", "Y", 1)
    graph.add_vertex("Z")
    return graph


@pytest.fixture
def random_graph() -> Callable[..., GraphStore]:
    """Factory for seeded random directed graphs with non-negative weights."""

    def build(
        seed: int,
        vertices: int = 30,
        edges: int = 90,
        max_weight: int = 20,
    ) -> GraphStore:
        rng = random.Random(seed)
        graph = GraphStore()
        for v in range(vertices):
            graph.add_vertex(v)
        for _ in range(edges):
            u = rng.randrange(vertices)
            v = rng.randrange(vertices)
            graph.add_edge(u, v, rng.randint(0, max_weight))
        return graph

    return build
