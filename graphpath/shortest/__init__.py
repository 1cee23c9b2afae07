"""
Shortest-path module.

Provides weighted pathfinding on graphs with non-negative weights:
- dijkstra: Single-source distances and predecessors
- astar: Heuristic-guided point-to-point search
- reconstruct_path: Follow a predecessor map back to the source
"""

from graphpath.shortest.astar import PathResult, astar, zero_heuristic
from graphpath.shortest.dijkstra import (
    ShortestPaths,
    dijkstra,
    reconstruct_path,
    validate_weights,
)

__all__ = [
    "dijkstra",
    "astar",
    "reconstruct_path",
    "validate_weights",
    "zero_heuristic",
    "ShortestPaths",
    "PathResult",
]
