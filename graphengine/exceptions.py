"""Custom exceptions for graphengine.

Every failure an algorithm can report is a distinct subclass of
:class:`GraphEngineError`. They also derive from the matching builtin
(``KeyError`` or ``ValueError``) so callers that already catch those keep
working.
"""

from typing import Hashable


class GraphEngineError(Exception):
    """Base exception for graphengine errors."""
    pass


class NodeNotFound(GraphEngineError, KeyError):
    """A source, target or queried node is not in the graph."""

    def __init__(self, node: Hashable, role: str = "Node"):
        self.node = node
        self.role = role
        super().__init__(f"{role} {node} not found in graph")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return str(self.args[0])


class WrongGraphKind(GraphEngineError, ValueError):
    """Algorithm requires a directed (or undirected) graph and got the other kind."""
    pass


class UnsupportedWeight(GraphEngineError, ValueError):
    """Edge weight not supported by the algorithm (e.g. negative in Dijkstra)."""
    pass


class NegativeCycle(GraphEngineError, ValueError):
    """Shortest path requested on a graph with a reachable negative cycle."""
    pass


class Disconnected(GraphEngineError, ValueError):
    """Graph is disconnected where a spanning structure was required."""
    pass


class InvalidParameter(GraphEngineError, ValueError):
    """Algorithm parameter outside its valid range."""
    pass


__all__ = [
    "GraphEngineError",
    "NodeNotFound",
    "WrongGraphKind",
    "UnsupportedWeight",
    "NegativeCycle",
    "Disconnected",
    "InvalidParameter",
]
