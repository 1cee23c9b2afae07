"""
Traversal module.

Provides unweighted graph traversals:
- bfs: Breadth-first visitation order
- dfs: Depth-first visitation order (explicit stack)
- bfs_levels: Hop distance to every reachable vertex
- bfs_path: Fewest-hops path between two vertices
"""

from graphpath.traversal.search import bfs, bfs_levels, bfs_path, dfs

__all__ = [
    "bfs",
    "dfs",
    "bfs_levels",
    "bfs_path",
]
