"""
GraphStore: adjacency-list storage for directed, weighted graphs.

Usage:
    from graphpath.graph import GraphStore

    graph = GraphStore()
    graph.add_edge("A", "B", 4)
    graph.add_undirected_edge("B", "C")
    graph.neighbors("B")   # [("C", 1)]

Undirected edges are stored as two directed edges with the same weight.
Adding an edge auto-registers both endpoints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Number
from typing import Hashable, Iterable, Iterator

import numpy as np

from graphpath.config import ADJACENCY_MATRIX_FILL, DEFAULT_EDGE_WEIGHT
from graphpath.errors import InvalidWeight, MissingEdge, UnknownVertex

logger = logging.getLogger(__name__)

Vertex = Hashable


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted edge.

    Attributes:
        source: Vertex the edge leaves from
        target: Vertex the edge points to
        weight: Numeric edge weight (1 for unweighted use)
    """

    source: Vertex
    target: Vertex
    weight: float = DEFAULT_EDGE_WEIGHT


def _check_weight(weight: object) -> None:
    # bool is a Number subclass
    if isinstance(weight, bool) or not isinstance(weight, Number):
        raise InvalidWeight(weight)
    try:
        # NaN is the only value unequal to itself
        if weight != weight:
            raise InvalidWeight(weight)
        _ = weight < 0
    except (TypeError, ArithmeticError):
        raise InvalidWeight(weight) from None


class GraphStore:
    """
    Mapping from vertex to its ordered list of outgoing edges.

    Vertices iterate in registration order and each adjacency list keeps
    edge-insertion order, which fixes the order BFS and DFS produce.

    By default the graph is simple: re-adding an existing edge u -> v
    replaces its weight in place (last write wins). Pass multigraph=True
    to keep parallel edges instead.

    Not thread-safe for mutation. Queries never mutate the store.
    """

    def __init__(self, multigraph: bool = False) -> None:
        """
        Initialize an empty graph.

        Args:
            multigraph: Keep parallel edges instead of replacing them
        """
        self._multigraph = multigraph
        self._adjacency: dict[Vertex, list[Edge]] = {}
        self._edge_count = 0

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple],
        directed: bool = True,
        multigraph: bool = False,
    ) -> GraphStore:
        """
        Build a graph from (source, target) or (source, target, weight) tuples.
        """
        graph = cls(multigraph=multigraph)
        for edge in edges:
            if len(edge) == 3:
                source, target, weight = edge
            else:
                (source, target), weight = edge, DEFAULT_EDGE_WEIGHT
            graph.add_edge(source, target, weight, directed=directed)
        return graph

    @property
    def multigraph(self) -> bool:
        return self._multigraph

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, vertex: Vertex) -> None:
        """Register a vertex. Adding a known vertex is a no-op."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(
        self,
        source: Vertex,
        target: Vertex,
        weight: float = DEFAULT_EDGE_WEIGHT,
        directed: bool = True,
    ) -> None:
        """
        Add an edge, registering either endpoint if absent.

        Args:
            source: Vertex the edge leaves from
            target: Vertex the edge points to
            weight: Edge weight (negative weights are stored, but rejected by
                weighted searches)
            directed: If False, also add target -> source with the same weight

        Raises:
            InvalidWeight: If weight is NaN, a bool, or not an orderable number
        """
        _check_weight(weight)
        self.add_vertex(source)
        self.add_vertex(target)

        self._insert(Edge(source, target, weight))
        if not directed and source != target:
            self._insert(Edge(target, source, weight))

    def add_undirected_edge(
        self, u: Vertex, v: Vertex, weight: float = DEFAULT_EDGE_WEIGHT
    ) -> None:
        """Add u -> v and v -> u with the same weight."""
        self.add_edge(u, v, weight, directed=False)

    def _insert(self, edge: Edge) -> None:
        out = self._adjacency[edge.source]
        if not self._multigraph:
            for i, existing in enumerate(out):
                if existing.target == edge.target:
                    logger.debug(
                        f"Replacing edge {edge.source!r} -> {edge.target!r} "
                        f"(weight {existing.weight} -> {edge.weight})"
                    )
                    out[i] = edge
                    return
        out.append(edge)
        self._edge_count += 1

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def has_vertex(self, vertex: Vertex) -> bool:
        """Check if vertex was added to the graph."""
        return vertex in self._adjacency

    def vertex_count(self) -> int:
        """Total number of vertices."""
        return len(self._adjacency)

    def edge_count(self) -> int:
        """
        Total number of stored directed edges.

        An undirected edge counts twice; an undirected self-loop once.
        """
        return self._edge_count

    def vertices(self) -> Iterator[Vertex]:
        """Iterate vertices in registration order."""
        return iter(self._adjacency)

    def edges(self) -> Iterator[Edge]:
        """Iterate all directed edges, grouped by source vertex."""
        for out in self._adjacency.values():
            yield from out

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        kind = "multigraph" if self._multigraph else "simple"
        return (
            f"{self.__class__.__name__}({kind}, vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )

    # =========================================================================
    # Adjacency Accessors
    # =========================================================================

    def _out(self, vertex: Vertex) -> list[Edge]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertex(vertex) from None

    def neighbors(self, vertex: Vertex) -> list[tuple[Vertex, float]]:
        """
        Get (target, weight) pairs for the outgoing edges of a vertex.

        Returned in edge-insertion order.

        Raises:
            UnknownVertex: If vertex was never added
        """
        return [(edge.target, edge.weight) for edge in self._out(vertex)]

    def out_edges(self, vertex: Vertex) -> list[Edge]:
        """Get outgoing Edge objects for a vertex (copy)."""
        return list(self._out(vertex))

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        """Check if at least one edge source -> target exists."""
        out = self._adjacency.get(source)
        if out is None:
            return False
        return any(edge.target == target for edge in out)

    def weight(self, source: Vertex, target: Vertex) -> float:
        """
        Get the weight of edge source -> target.

        For a multigraph the smallest parallel weight is returned.

        Raises:
            UnknownVertex: If source was never added
            MissingEdge: If there is no such edge
        """
        weights = [edge.weight for edge in self._out(source) if edge.target == target]
        if not weights:
            raise MissingEdge(source, target)
        return min(weights)

    def out_degree(self, vertex: Vertex) -> int:
        """Number of outgoing edges."""
        return len(self._out(vertex))

    def in_degree(self, vertex: Vertex) -> int:
        """
        Number of incoming edges.

        Warning: This is O(V + E), since only outgoing edges are indexed.
        """
        self._out(vertex)
        return sum(1 for edge in self.edges() if edge.target == vertex)

    def predecessors(self, vertex: Vertex) -> list[Vertex]:
        """
        Get all vertices with an edge into this vertex.

        Warning: This is O(V + E), since only outgoing edges are indexed.
        """
        self._out(vertex)
        inbound = []
        seen = set()
        for edge in self.edges():
            if edge.target == vertex and edge.source not in seen:
                seen.add(edge.source)
                inbound.append(edge.source)
        return inbound

    # =========================================================================
    # Weight Queries
    # =========================================================================

    def min_weight(self) -> float | None:
        """Smallest edge weight, or None for a graph without edges."""
        return min((edge.weight for edge in self.edges()), default=None)

    def has_negative_weights(self) -> bool:
        """Whether any edge has a weight below zero."""
        return any(edge.weight < 0 for edge in self.edges())

    def first_negative_edge(self) -> Edge | None:
        """First edge with a negative weight, in iteration order."""
        return next((edge for edge in self.edges() if edge.weight < 0), None)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def to_adjacency_matrix(
        self,
        order: list[Vertex] | None = None,
        fill: float = ADJACENCY_MATRIX_FILL,
    ) -> np.ndarray:
        """
        Export edge weights as a dense (V, V) float matrix.

        Args:
            order: Vertex order for rows/columns (default: registration order)
            fill: Value for vertex pairs without an edge

        Parallel edges collapse to their minimum weight.

        Raises:
            UnknownVertex: If order names a vertex not in the graph
        """
        if order is None:
            order = list(self._adjacency)
        index = {vertex: i for i, vertex in enumerate(order)}
        for vertex in order:
            self._out(vertex)

        size = len(order)
        matrix = np.full((size, size), fill, dtype=np.float64)
        present = np.zeros((size, size), dtype=bool)
        for edge in self.edges():
            i = index.get(edge.source)
            j = index.get(edge.target)
            if i is None or j is None:
                continue
            if not present[i, j] or edge.weight < matrix[i, j]:
                matrix[i, j] = edge.weight
                present[i, j] = True
        return matrix

    def stats(self) -> dict:
        """Get statistics about the graph."""
        degrees = [len(out) for out in self._adjacency.values()]
        has_inbound = {edge.target for edge in self.edges()}
        return {
            "vertices": self.vertex_count(),
            "edges": self.edge_count(),
            "multigraph": self._multigraph,
            "max_out_degree": max(degrees, default=0),
            "isolated_vertices": sum(
                1 for vertex, out in self._adjacency.items()
                if not out and vertex not in has_inbound
            ),
            "min_weight": self.min_weight(),
        }
