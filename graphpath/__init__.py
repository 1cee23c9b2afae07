"""
graphpath: graph traversal and shortest-path engine.

Stores a directed, weighted graph and answers reachability (BFS),
depth-first order (DFS) and non-negative shortest-path (Dijkstra, A*)
queries over it.

Usage:
    from graphpath import GraphStore, bfs, dijkstra

    graph = GraphStore()
    graph.add_edge("A", "B", 4)
    list(bfs(graph, "A"))
    dijkstra(graph, "A").distances
"""

from graphpath.errors import (
    EmptyQueue,
    GraphPathError,
    InvalidWeight,
    MissingEdge,
    NegativeWeightError,
    UnknownVertex,
)
from graphpath.graph import Edge, GraphStore
from graphpath.heap import PriorityQueue
from graphpath.shortest import PathResult, ShortestPaths, astar, dijkstra, reconstruct_path
from graphpath.traversal import bfs, bfs_levels, bfs_path, dfs

__version__ = "0.1.0"

__all__ = [
    "GraphStore",
    "Edge",
    "PriorityQueue",
    "bfs",
    "dfs",
    "bfs_levels",
    "bfs_path",
    "dijkstra",
    "astar",
    "reconstruct_path",
    "ShortestPaths",
    "PathResult",
    "GraphPathError",
    "UnknownVertex",
    "MissingEdge",
    "InvalidWeight",
    "EmptyQueue",
    "NegativeWeightError",
]
