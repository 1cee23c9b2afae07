"""
Graph storage module.

Provides the adjacency-list graph all searches run on:
- Edge: Directed, weighted edge
- GraphStore: Vertex -> outgoing edges mapping
"""

from graphpath.graph.store import Edge, GraphStore

__all__ = ["Edge", "GraphStore"]
