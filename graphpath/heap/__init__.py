"""
Priority queue module.

Provides the binary min-heap used by the weighted searches.
"""

from graphpath.heap.priority_queue import PriorityQueue

__all__ = ["PriorityQueue"]
