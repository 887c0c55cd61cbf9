"""Leaf data structures shared by the algorithms."""

from .priority_queue import PriorityQueue
from .union_find import UnionFind

__all__ = ["UnionFind", "PriorityQueue"]
