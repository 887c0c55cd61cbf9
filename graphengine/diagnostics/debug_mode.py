"""Debug mode management for graphengine.

When debug mode is on, algorithms validate their own outputs (partitions,
bijections, spanning trees) before returning them. The initial state comes
from the ``GRAPHENGINE_DEBUG`` environment variable; any of ``1``, ``true``,
``yes`` or ``on`` (case-insensitive) turns it on.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "GRAPHENGINE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(os.environ.get(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return whether algorithms currently validate their outputs."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """
    Globally enable or disable output validation.

    Returns:
        The previous setting, so callers can restore it.
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    return previous


def reload_debug_from_env() -> bool:
    """
    Re-read ``GRAPHENGINE_DEBUG`` and apply it.

    Useful after changing the environment of a running process.

    Returns:
        The new setting.
    """
    set_debug_enabled(_flag_from_env(os.environ.get(_DEBUG_ENV_VAR)))
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[bool]:
    """
    Temporarily enable or disable output validation.

    Yields the setting that was active on entry; it is restored on exit,
    even if the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     components = connected_components(graph)  # validated
    """
    previous = set_debug_enabled(enabled)
    try:
        yield previous
    finally:
        set_debug_enabled(previous)
