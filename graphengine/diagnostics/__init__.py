"""Diagnostics and debugging utilities for graphengine."""

from .core import (
    assert_inverse_mappings,
    assert_partition,
    assert_spanning_tree,
    is_partition,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reload_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "is_partition",
    "assert_partition",
    "assert_inverse_mappings",
    "assert_spanning_tree",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "reload_debug_from_env",
]
