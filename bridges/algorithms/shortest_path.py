"""Minimum-weight path by exhaustive recursive search.

Every simple path from origin to target over the directed adjacency view is
enumerated; the lightest one wins. The search is exponential in the worst case,
which is acceptable for hand-drawn graphs of a few dozen nodes.
"""

from __future__ import annotations

from typing import List, Optional

from bridges.logging import get_logger
from bridges.model.graph import Graph
from bridges.model.path import Path
from bridges.types.base import NodeID
from bridges.types.dto import ShortestPathResult

LOGGER = get_logger(__name__)


def find_shortest_path(
    graph: Graph,
    origin: NodeID,
    target: NodeID,
    directed: bool = True,
) -> Optional[ShortestPathResult]:
    """Find the minimum-weight path from ``origin`` to ``target``.

    Ties go to the path discovered first.

    Args:
        graph: Graph to search.
        origin: First node of the path.
        target: Last node of the path.
        directed: Adjacency view to search; the analysis layer always passes True.

    Returns:
        The winning path and the other discovered paths, or None if the target
        is unreachable.

    Raises:
        ValueError: If either node does not exist.
    """
    graph.get_node(origin)
    graph.get_node(target)

    traversals: List[Path] = []
    best = _search(graph, origin, target, Path(graph), traversals, directed)
    if best is None:
        LOGGER.debug("No path from %s to %s", origin, target)
        return None

    others: List[Path] = []
    for path in traversals:
        if path.same_route(best) or any(path.same_route(seen) for seen in others):
            continue
        others.append(path)

    LOGGER.debug(
        "Shortest path %s (weight %d) among %d alternatives",
        best.nodes,
        best.weight,
        len(others),
    )
    return ShortestPathResult(path=best, traversals=tuple(others))


def _search(
    graph: Graph,
    source: NodeID,
    sink: NodeID,
    prefix: Path,
    traversals: List[Path],
    directed: bool,
) -> Optional[Path]:
    """Return the lightest extension of ``prefix`` through ``source`` to ``sink``.

    Each complete path returned by a recursive call is appended to
    ``traversals``, so the list records the search order.
    """
    path = prefix.copy()
    path.append_node(source, directed=directed)

    if source == sink:
        return path

    shortest: Optional[Path] = None
    for node in graph.adjacent_nodes(source, directed=directed):
        if node in path:
            continue
        candidate = _search(graph, node, sink, path, traversals, directed)
        if candidate is None:
            continue
        traversals.append(candidate)
        if shortest is None or candidate.weight < shortest.weight:
            shortest = candidate

    return shortest
