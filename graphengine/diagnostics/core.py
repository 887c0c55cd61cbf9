"""Invariant checks for algorithm outputs.

These helpers take plain Python containers so they can validate any
algorithm's result. The ``assert_*`` variants raise ``AssertionError`` with a
message describing the first violation found.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from ..structures.union_find import UnionFind


def _partition_violation(
    nodes: Iterable[Hashable],
    components: Iterable[Iterable[Hashable]],
) -> Optional[str]:
    """Describe the first way ``components`` fails to partition ``nodes``, or None."""
    expected = set(nodes)
    seen: set = set()

    for index, component in enumerate(components):
        for node in component:
            if node not in expected:
                return f"Component {index} contains unknown node {node!r}."
            if node in seen:
                return f"Node {node!r} appears in more than one component."
            seen.add(node)

    missing = expected - seen
    if missing:
        return f"Partition is missing {len(missing)} node(s), e.g. {next(iter(missing))!r}."
    return None


def is_partition(
    nodes: Iterable[Hashable],
    components: Iterable[Iterable[Hashable]],
) -> bool:
    """
    Check whether ``components`` partitions ``nodes``.

    Every node must appear in exactly one component and no component may
    contain anything else.
    """
    return _partition_violation(nodes, components) is None


def assert_partition(
    nodes: Iterable[Hashable],
    components: Iterable[Iterable[Hashable]],
) -> None:
    """
    Assert that ``components`` is a partition of ``nodes``.

    Raises
    ------
    AssertionError
        If a node is missing, repeated, or unknown.
    """
    violation = _partition_violation(nodes, components)
    if violation is not None:
        raise AssertionError(violation)


def assert_inverse_mappings(
    forward: Dict[Hashable, Hashable],
    backward: Dict[Hashable, Hashable],
) -> None:
    """
    Assert that two partial mappings are inverses of each other.

    Raises
    ------
    AssertionError
        If sizes differ or some pair does not round-trip.
    """
    if len(forward) != len(backward):
        raise AssertionError(
            f"Mappings have different sizes ({len(forward)} vs {len(backward)})."
        )

    for key, value in forward.items():
        if backward.get(value, _MISSING) != key:
            raise AssertionError(
                f"Mapping {key!r} -> {value!r} has no matching inverse entry."
            )


def assert_spanning_tree(
    nodes: Sequence[Hashable],
    edges: Iterable[Tuple[Hashable, Hashable]],
) -> None:
    """
    Assert that ``edges`` form a spanning tree over ``nodes``.

    A spanning tree on n nodes has exactly n - 1 edges, no cycle, and touches
    only known nodes.

    Raises
    ------
    AssertionError
        On wrong edge count, a cycle, or an unknown endpoint.
    """
    edge_list: List[Tuple[Hashable, Hashable]] = list(edges)
    n = len(nodes)

    if n > 0 and len(edge_list) != n - 1:
        raise AssertionError(
            f"Spanning tree over {n} nodes must have {n - 1} edges, got {len(edge_list)}."
        )

    uf = UnionFind(nodes)
    for u, v in edge_list:
        if u not in uf or v not in uf:
            raise AssertionError(f"Edge ({u!r}, {v!r}) touches an unknown node.")
        if not uf.union(u, v):
            raise AssertionError(f"Edge ({u!r}, {v!r}) closes a cycle.")


_MISSING = object()


__all__ = [
    "is_partition",
    "assert_partition",
    "assert_inverse_mappings",
    "assert_spanning_tree",
]
