"""Connectivity: connected, weakly and strongly connected components."""

from .connected import (
    CondensationResult,
    condensation_graph,
    connected_components,
    connected_components_dfs,
    get_connected_component,
    is_connected,
    is_strongly_connected,
    is_weakly_connected,
    largest_connected_component,
    number_of_connected_components,
    strongly_connected_components,
    weakly_connected_components,
)

__all__ = [
    "CondensationResult",
    "connected_components",
    "connected_components_dfs",
    "number_of_connected_components",
    "is_connected",
    "largest_connected_component",
    "get_connected_component",
    "strongly_connected_components",
    "is_strongly_connected",
    "weakly_connected_components",
    "is_weakly_connected",
    "condensation_graph",
]
