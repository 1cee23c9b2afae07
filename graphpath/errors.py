"""
Exceptions raised by graphpath.

Every error derives from GraphPathError and from the closest builtin,
so callers can catch either (e.g. UnknownVertex is also a KeyError).

An unreachable vertex is not an error: it is simply absent from
traversal output and shortest-path result maps.
"""

from __future__ import annotations

from typing import Any, Hashable


class GraphPathError(Exception):
    """Base class for all graphpath errors."""


class UnknownVertex(GraphPathError, KeyError):
    """A query referenced a vertex that was never added to the graph."""

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Unknown vertex: {self.vertex!r}"


class MissingEdge(GraphPathError, KeyError):
    """A query referenced an edge that does not exist."""

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__((source, target))
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"No edge {self.source!r} -> {self.target!r}"


class InvalidWeight(GraphPathError, ValueError):
    """An edge weight is not a number that orders against zero."""

    def __init__(self, weight: Any) -> None:
        super().__init__(f"Edge weight must be an orderable number, got {weight!r}")
        self.weight = weight


class EmptyQueue(GraphPathError, IndexError):
    """extract_min() or peek() called on an empty priority queue."""

    def __init__(self, operation: str = "extract_min") -> None:
        super().__init__(f"{operation}() on an empty priority queue")


class NegativeWeightError(GraphPathError, ValueError):
    """A weighted search was invoked on a graph with a negative edge weight."""

    def __init__(self, edge: Any) -> None:
        super().__init__(
            f"Negative edge weight {edge.weight!r} on {edge.source!r} -> {edge.target!r}; "
            "shortest paths require non-negative weights"
        )
        self.edge = edge
