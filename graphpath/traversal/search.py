"""
Breadth-first and depth-first traversal over a GraphStore.

bfs() and dfs() return lazy iterators: each reachable vertex is yielded
exactly once, unreachable vertices never appear. Neighbors are visited in
edge-insertion order. An unknown source raises UnknownVertex at call time,
not on first iteration.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Hashable, Iterator

from graphpath.config import BFS_MAX_DEPTH
from graphpath.errors import UnknownVertex
from graphpath.graph.store import GraphStore

logger = logging.getLogger(__name__)


def _require_vertex(graph: GraphStore, vertex: Hashable) -> None:
    if not graph.has_vertex(vertex):
        raise UnknownVertex(vertex)


def _check_depth(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")


def bfs(graph: GraphStore, source: Hashable) -> Iterator[Hashable]:
    """
    Iterate vertices reachable from source in breadth-first order.

    Vertices come out by non-decreasing hop distance; within a level they
    follow the neighbor order of the vertex that discovered them.

    Raises:
        UnknownVertex: If source is not in the graph
    """
    _require_vertex(graph, source)
    return _bfs(graph, source)


def _bfs(graph: GraphStore, source: Hashable) -> Iterator[Hashable]:
    queue = deque([source])
    visited = {source}

    while queue:
        current = queue.popleft()
        yield current

        for neighbor, _ in graph.neighbors(current):
            # Mark on enqueue so nothing is queued twice
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)


def dfs(graph: GraphStore, source: Hashable) -> Iterator[Hashable]:
    """
    Iterate vertices reachable from source in depth-first (preorder) order.

    Uses an explicit stack, so graph depth is not limited by recursion.

    Raises:
        UnknownVertex: If source is not in the graph
    """
    _require_vertex(graph, source)
    return _dfs(graph, source)


def _dfs(graph: GraphStore, source: Hashable) -> Iterator[Hashable]:
    stack = [source]
    visited = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        visited.add(current)
        yield current

        # Reversed so the first neighbor is popped first; visited is re-checked on pop
        for neighbor, _ in reversed(graph.neighbors(current)):
            stack.append(neighbor)


def bfs_levels(
    graph: GraphStore,
    source: Hashable,
    max_depth: int | None = None,
) -> dict[Hashable, int]:
    """
    Compute hop distance from source to every reachable vertex.

    Args:
        graph: Graph to search
        source: Start vertex (distance 0)
        max_depth: Stop expanding beyond this many hops (default: unlimited)

    Returns:
        Dict mapping vertex to hop count, in BFS discovery order

    Raises:
        UnknownVertex: If source is not in the graph
    """
    _require_vertex(graph, source)
    _check_depth(max_depth)

    levels = {source: 0}
    queue = deque([source])

    while queue:
        current = queue.popleft()
        depth = levels[current]
        if max_depth is not None and depth >= max_depth:
            continue

        for neighbor, _ in graph.neighbors(current):
            if neighbor not in levels:
                levels[neighbor] = depth + 1
                queue.append(neighbor)

    return levels


def bfs_path(
    graph: GraphStore,
    source: Hashable,
    target: Hashable,
    max_depth: int | None = BFS_MAX_DEPTH,
) -> list[Hashable] | None:
    """
    Find a fewest-hops path using BFS with parent tracking.

    Edge weights are ignored. Stops as soon as the target is discovered.

    Args:
        graph: Graph to search
        source: Start vertex
        target: Vertex to reach
        max_depth: Maximum number of hops (default: BFS_MAX_DEPTH, unlimited if unset)

    Returns:
        List of vertices from source to target, or None if no path exists
        within max_depth

    Raises:
        UnknownVertex: If source or target is not in the graph
    """
    _require_vertex(graph, source)
    _require_vertex(graph, target)
    _check_depth(max_depth)

    if source == target:
        return [source]

    queue = deque([(source, 0)])
    parents = {source: None}  # Maps vertex to parent vertex

    while queue:
        current, depth = queue.popleft()

        if max_depth is not None and depth >= max_depth:
            continue

        for neighbor, _ in graph.neighbors(current):
            if neighbor in parents:
                continue

            parents[neighbor] = current

            if neighbor == target:
                # Found! Reconstruct path
                path = [neighbor]
                while path[-1] != source:
                    path.append(parents[path[-1]])
                path.reverse()
                logger.debug(f"BFS found path ({len(path) - 1} hops): {path}")
                return path

            queue.append((neighbor, depth + 1))

    logger.debug(f"BFS: no path from {source!r} to {target!r}")
    return None
