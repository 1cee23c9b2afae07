"""
Single-source shortest paths with Dijkstra's algorithm.

Drives the binary-heap PriorityQueue with lazy deletion: a vertex may sit
in the queue several times, and entries whose priority is worse than the
best known distance are skipped when popped.

Usage:
    from graphpath.shortest import dijkstra

    result = dijkstra(graph, "A")
    result.distances["B"]
    result.path_to("D")     # ["A", "C", "B", "D"], or None if unreachable
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable, Mapping

from graphpath.errors import NegativeWeightError, UnknownVertex
from graphpath.graph.store import GraphStore
from graphpath.heap.priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass
class ShortestPaths:
    """
    Result of a single-source shortest-path search.

    A vertex absent from distances has no path from source; this is not
    an error.

    Attributes:
        source: Start vertex
        distances: Minimum total weight from source to each reachable vertex
        predecessors: Previous vertex on a shortest path (source has none)
        relaxations: Number of edges examined
        settled: Number of non-stale entries popped from the queue
        max_frontier: Largest priority queue size during the search
    """

    source: Hashable
    distances: dict[Hashable, float] = field(default_factory=dict)
    predecessors: dict[Hashable, Hashable] = field(default_factory=dict)
    relaxations: int = 0
    settled: int = 0
    max_frontier: int = 0

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.distances

    def has_path(self, vertex: Hashable) -> bool:
        """Whether vertex is reachable from source."""
        return vertex in self.distances

    def distance_to(self, vertex: Hashable) -> float | None:
        """Shortest distance to vertex, or None if unreachable."""
        return self.distances.get(vertex)

    def path_to(self, vertex: Hashable) -> list[Hashable] | None:
        """Shortest path from source to vertex, or None if unreachable."""
        if vertex not in self.distances:
            return None
        return reconstruct_path(self.predecessors, self.source, vertex)


def reconstruct_path(
    predecessors: Mapping[Hashable, Hashable],
    source: Hashable,
    target: Hashable,
) -> list[Hashable] | None:
    """
    Walk the predecessor chain from target back to source.

    Returns:
        List of vertices from source to target, or None if the chain
        does not lead back to source
    """
    path = [target]
    seen = {target}
    while path[-1] != source:
        previous = predecessors.get(path[-1], _MISSING)
        if previous is _MISSING or previous in seen:
            return None
        seen.add(previous)
        path.append(previous)
    path.reverse()
    return path


def validate_weights(graph: GraphStore) -> None:
    """
    Reject graphs with any negative edge weight.

    Raises:
        NegativeWeightError: On the first negative edge found
    """
    edge = graph.first_negative_edge()
    if edge is not None:
        logger.error(f"Negative weight {edge.weight} on {edge.source!r} -> {edge.target!r}")
        raise NegativeWeightError(edge)


def dijkstra(
    graph: GraphStore,
    source: Hashable,
    target: Hashable | None = None,
) -> ShortestPaths:
    """
    Compute shortest distances and predecessors from source.

    Args:
        graph: Graph with non-negative edge weights
        source: Start vertex
        target: If given, stop once this vertex's distance is final. Other
            entries in the result may then be tentative.

    Returns:
        ShortestPaths with distances and predecessors for reachable vertices

    Raises:
        UnknownVertex: If source (or a given target) is not in the graph
        NegativeWeightError: If any edge weight is negative (checked before
            the search starts)
    """
    if not graph.has_vertex(source):
        raise UnknownVertex(source)
    if target is not None and not graph.has_vertex(target):
        raise UnknownVertex(target)
    validate_weights(graph)

    result = ShortestPaths(source=source)
    distances = result.distances
    predecessors = result.predecessors

    distances[source] = 0
    queue: PriorityQueue = PriorityQueue()
    queue.insert(source, 0)

    while not queue.is_empty():
        current, distance = queue.extract_min()

        # Stale entry: a shorter path was recorded after this was pushed
        if distance > distances[current]:
            continue

        result.settled += 1
        if target is not None and current == target:
            logger.debug(f"Dijkstra reached target {target!r} at distance {distance}")
            break

        for neighbor, weight in graph.neighbors(current):
            result.relaxations += 1
            candidate = distance + weight
            if neighbor not in distances or candidate < distances[neighbor]:
                distances[neighbor] = candidate
                predecessors[neighbor] = current
                queue.insert(neighbor, candidate)

    result.max_frontier = queue.max_size
    logger.debug(
        f"Dijkstra from {source!r}: {len(distances)} reachable, "
        f"{result.relaxations} relaxations, max frontier {result.max_frontier}"
    )
    return result
