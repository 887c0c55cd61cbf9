"""Graph data model."""

from .graph import DegreeMode, Edge, Graph, NodeId, coerce_degree_mode

__all__ = ["Graph", "Edge", "NodeId", "DegreeMode", "coerce_degree_mode"]
