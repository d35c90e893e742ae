"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import Dict, Iterable

from bridges.types.base import NodeID


class UnionFind:
    """Partition of nodes into disjoint sets.

    Used by Kruskal's algorithm to tell whether an edge would close a cycle.
    """

    def __init__(self, nodes: Iterable[NodeID]) -> None:
        self.parent: Dict[NodeID, NodeID] = {}
        self.rank: Dict[NodeID, int] = {}
        for node in nodes:
            self.parent[node] = node
            self.rank[node] = 0

    def __len__(self) -> int:
        """Number of disjoint sets."""
        return sum(1 for node, root in self.parent.items() if node == root)

    def find(self, x: NodeID) -> NodeID:
        """Return the representative of ``x``'s set, compressing the path."""
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: NodeID, y: NodeID) -> bool:
        """Merge the sets containing ``x`` and ``y``.

        Returns:
            True if the sets were distinct and have been merged, False if ``x``
            and ``y`` already shared a set.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
        return True

    def connected(self, x: NodeID, y: NodeID) -> bool:
        return self.find(x) == self.find(y)
