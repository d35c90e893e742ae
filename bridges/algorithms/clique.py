"""Largest maximal clique via Bron-Kerbosch without pivoting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set

from bridges.logging import get_logger
from bridges.model.graph import Graph
from bridges.types.base import NodeID

LOGGER = get_logger(__name__)


@dataclass
class CliqueSearch:
    """Accumulator threaded through the Bron-Kerbosch recursion.

    Attributes:
        graph: Graph being searched.
        directed: Adjacency view used for neighbor sets.
        largest: Largest maximal clique reported so far.
        reported: Number of maximal cliques reported.
    """

    graph: Graph
    directed: bool = False
    largest: Optional[FrozenSet[NodeID]] = None
    reported: int = 0
    _order: List[NodeID] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self._order = self.graph.node_ids

    def neighbors(self, node: NodeID) -> Set[NodeID]:
        return set(self.graph.adjacent_nodes(node, directed=self.directed))

    def ordered(self, nodes: Set[NodeID]) -> List[NodeID]:
        """Snapshot of ``nodes`` in graph insertion order."""
        return [node for node in self._order if node in nodes]

    def report(self, clique: Set[NodeID]) -> None:
        self.reported += 1
        if self.largest is None or len(clique) > len(self.largest):
            self.largest = frozenset(clique)


def bron_kerbosch(
    search: CliqueSearch, r: Set[NodeID], p: Set[NodeID], x: Set[NodeID]
) -> None:
    """Report every maximal clique extending ``r`` to ``search``.

    Args:
        search: Accumulator receiving maximal cliques.
        r: Current clique, mutated in place and restored before returning.
        p: Candidates that extend ``r``.
        x: Candidates already processed, which would make ``r`` non-maximal.
    """
    if not p and not x:
        search.report(r)
        return

    p = set(p)
    x = set(x)
    for node in search.ordered(p):
        neighbors = search.neighbors(node)
        r.add(node)
        bron_kerbosch(search, r, p & neighbors, x & neighbors)
        r.discard(node)
        p.discard(node)
        x.add(node)


def find_maximal_clique(
    graph: Graph, directed: bool = False
) -> Optional[FrozenSet[NodeID]]:
    """Find the largest maximal clique; the first one found wins ties.

    Args:
        graph: Graph to search.
        directed: If True, only successors count as neighbors.

    Returns:
        Node handles of the clique, or None if no clique has two or more nodes.
    """
    search = CliqueSearch(graph, directed=directed)
    bron_kerbosch(search, set(), set(graph.node_ids), set())

    LOGGER.debug(
        "Bron-Kerbosch reported %d maximal cliques, largest %s",
        search.reported,
        sorted(search.largest) if search.largest else None,
    )
    if search.largest is None or len(search.largest) < 2:
        return None
    return search.largest
