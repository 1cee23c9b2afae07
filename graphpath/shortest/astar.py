"""
Heuristic-guided point-to-point search (weighted A*).

Orders the frontier by f(n) = g(n) + epsilon * h(n), where g is the best
known distance from source and h estimates the remaining distance to the
target. With h == 0 this is target-directed Dijkstra. With an admissible h
(never overestimates) and epsilon <= 1 the returned path is optimal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Hashable

from graphpath.config import ASTAR_EPSILON
from graphpath.errors import UnknownVertex
from graphpath.graph.store import GraphStore
from graphpath.heap.priority_queue import PriorityQueue
from graphpath.shortest.dijkstra import reconstruct_path, validate_weights

logger = logging.getLogger(__name__)

Heuristic = Callable[[Hashable, Hashable], float]


def zero_heuristic(vertex: Hashable, target: Hashable) -> float:
    return 0


@dataclass
class PathResult:
    """
    Result of a point-to-point search.

    Attributes:
        source: Start vertex
        target: Vertex searched for
        path: Vertices from source to target, or None if unreachable
        cost: Total weight of path, or None if unreachable
        expanded: Number of vertices expanded before the search ended
    """

    source: Hashable
    target: Hashable
    path: list[Hashable] | None
    cost: float | None
    expanded: int

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def hops(self) -> int | None:
        """Number of edges on the path."""
        return len(self.path) - 1 if self.path is not None else None


def astar(
    graph: GraphStore,
    source: Hashable,
    target: Hashable,
    heuristic: Heuristic | None = None,
    epsilon: float = ASTAR_EPSILON,
) -> PathResult:
    """
    Find a low-cost path from source to target with weighted A*.

    Args:
        graph: Graph with non-negative edge weights
        source: Start vertex
        target: Vertex to reach
        heuristic: h(vertex, target) estimate of remaining cost (default: 0)
        epsilon: Heuristic weight; > 1 expands fewer vertices but may
            return a suboptimal path

    Returns:
        PathResult (path and cost are None if target is unreachable)

    Raises:
        UnknownVertex: If source or target is not in the graph
        NegativeWeightError: If any edge weight is negative
        ValueError: If epsilon is negative
    """
    if not graph.has_vertex(source):
        raise UnknownVertex(source)
    if not graph.has_vertex(target):
        raise UnknownVertex(target)
    if epsilon < 0:
        raise ValueError(f"epsilon must be >= 0, got {epsilon}")
    validate_weights(graph)

    if heuristic is None:
        heuristic = zero_heuristic

    def estimate(vertex: Hashable) -> float:
        return epsilon * heuristic(vertex, target)

    best = {source: 0}
    parents: dict[Hashable, Hashable] = {}
    expanded = 0

    # Keys carry the g they were queued with, for the staleness check
    queue: PriorityQueue = PriorityQueue()
    queue.insert((source, 0), estimate(source))

    while not queue.is_empty():
        (current, g), _ = queue.extract_min()

        # Stale entry: a cheaper path was recorded after this was pushed
        if g > best[current]:
            continue
        expanded += 1

        if current == target:
            path = reconstruct_path(parents, source, target)
            logger.debug(
                f"A* found path (cost {best[target]}, {expanded} expanded): {path}"
            )
            return PathResult(source, target, path, best[target], expanded)

        for neighbor, weight in graph.neighbors(current):
            candidate = g + weight
            if neighbor not in best or candidate < best[neighbor]:
                best[neighbor] = candidate
                parents[neighbor] = current
                queue.insert((neighbor, candidate), candidate + estimate(neighbor))

    logger.warning(f"A*: No path found from {source!r} to {target!r}")
    return PathResult(source, target, None, None, expanded)
