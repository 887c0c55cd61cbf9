"""
Union-Find (disjoint set forest).

Used by Kruskal's algorithm and by the Union-Find based connected-component
routines.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, Iterable, List

from ..exceptions import NodeNotFound


class UnionFind:
    """
    Union-Find data structure with path compression and union by rank.

    Every element starts as its own singleton set. ``find`` returns a
    canonical representative: two elements are in the same set iff their
    representatives are equal. Path compression rewrites parent pointers
    but never changes the partition.

    Complexity: near O(1) amortized per operation (inverse Ackermann).

    Example:
        >>> uf = UnionFind(["a", "b", "c"])
        >>> uf.union("a", "b")
        True
        >>> uf.connected("a", "b")
        True
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        """
        Initialize union-find with the given elements.

        Args:
            elements: Iterable of hashable elements.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}
        self._components = 0

        for element in elements:
            self.add(element)

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, element: Hashable) -> bool:
        return element in self.parent

    @property
    def component_count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._components

    def add(self, element: Hashable) -> None:
        """Track ``element`` as a new singleton set (no-op if already tracked)."""
        if element not in self.parent:
            self.parent[element] = element
            self.rank[element] = 0
            self._components += 1

    def find(self, x: Hashable) -> Hashable:
        """
        Find the representative of x, compressing the path on the way.

        Iterative two-pass implementation so long chains cannot exhaust the
        interpreter stack.

        Raises:
            NodeNotFound: If x is not tracked.
        """
        if x not in self.parent:
            raise NodeNotFound(x, role="Element")

        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union the sets containing x and y using union by rank.

        With equal ranks the root of y is attached under the root of x.

        Returns:
            True if a merge happened, False if x and y were already joined.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self._components -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        """True if x and y are in the same set; untracked elements are never connected."""
        if x not in self.parent or y not in self.parent:
            return False
        return self.find(x) == self.find(y)

    def get_component(self, x: Hashable) -> List[Hashable]:
        """Return every element in the same set as x, in insertion order."""
        root = self.find(x)
        return [element for element in self.parent if self.find(element) == root]

    def get_component_size(self, x: Hashable) -> int:
        return len(self.get_component(x))

    def get_all_components(self) -> List[List[Hashable]]:
        """
        Return the current partition.

        Components are ordered by the first appearance of any member, and
        members keep insertion order, so one call always yields a stable
        listing. Every element appears in exactly one list.
        """
        groups: Dict[Hashable, List[Hashable]] = {}
        for element in self.parent:
            groups.setdefault(self.find(element), []).append(element)
        return list(groups.values())
