"""Graph matching: VF2 isomorphism."""

from .isomorphism import (
    IsomorphismResult,
    find_all_isomorphisms,
    is_graph_isomorphic,
)

__all__ = ["IsomorphismResult", "is_graph_isomorphic", "find_all_isomorphisms"]
