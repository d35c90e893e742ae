"""Selection-driven algorithm entry points.

Usage:
    from bridges import Graph, GraphMode, analyze

    graph = Graph()
    a, b = graph.add_node(), graph.add_node()
    graph.add_edge(a, b)

    graph.mode = GraphMode.SELECT
    graph.select(a)
    graph.select(b)
    result = analyze(graph).shortest_path()

Each entry point checks its preconditions, announces failures and results
through the graph's notifier, and returns a plain outcome record. Nothing here
raises for user-facing problems: wrong selections come back as
``PreconditionFailed``, graphs of the wrong directedness as
``DirectednessRequired`` (the caller converts the graph and calls again), and
unreachable targets as ``NotFound``.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, Optional, Union

from bridges.algorithms.clique import find_maximal_clique
from bridges.algorithms.max_flow import calc_max_flow
from bridges.algorithms.shortest_path import find_shortest_path
from bridges.algorithms.spanning_tree import kruskal_mst, prim_mst
from bridges.logging import get_logger
from bridges.model.graph import Graph
from bridges.model.path import Path
from bridges.types.base import GraphMode, NodeID
from bridges.types.dto import (
    DirectednessRequired,
    MaxFlowResult,
    NotFound,
    PreconditionFailed,
    ShortestPathResult,
)

LOGGER = get_logger(__name__)

SHORTEST_PATH = "Shortest Path"
MINIMUM_SPANNING_TREE = "Minimum Spanning Tree"
FORD_FULKERSON = "Ford-Fulkerson"
BRON_KERBOSCH = "Bron-Kerbosch Maximal Clique"

MAKE_DIRECTED = "Edges will be made directed in order for the algorithm to run."
MAKE_UNDIRECTED = "Edges will be made undirected in order for the algorithm to run."


@dataclass
class AnalysisContext:
    """Runs algorithms against a graph's current selection.

    Attributes:
        graph: The graph analysed; its selection supplies algorithm inputs.
    """

    graph: Graph = field(repr=False)

    @classmethod
    def from_graph(cls, graph: Graph) -> "AnalysisContext":
        return cls(graph=graph)

    def shortest_path(
        self,
    ) -> Union[ShortestPathResult, NotFound, PreconditionFailed, DirectednessRequired]:
        """Lightest path from the first to the second selected node.

        Requires select mode, exactly two selected nodes and a directed graph.
        """
        failure = self._require_selection(
            SHORTEST_PATH,
            2,
            "Please select an origin node and a target node before using the "
            "Shortest Path algorithm.",
        )
        if failure is not None:
            return failure
        if not self.graph.is_directed:
            return self._require_directedness(SHORTEST_PATH, True, MAKE_DIRECTED)

        origin, target = self.graph.selected_nodes
        with self._view_only():
            result = find_shortest_path(self.graph, origin, target, directed=True)
        self.graph.deselect_all()

        if result is None:
            self.graph.notify(
                SHORTEST_PATH,
                f"No path found from {self.graph.get_node(origin)} "
                f"to {self.graph.get_node(target)}.",
            )
            return NotFound(origin, target)
        return result

    def prim_mst(self) -> Union[Path, PreconditionFailed, DirectednessRequired]:
        """Minimum spanning tree rooted at the single selected node.

        Requires select mode, exactly one selected node and an undirected graph.
        """
        failure = self._require_selection(
            MINIMUM_SPANNING_TREE,
            1,
            "Please select a root node before running Prim's Minimum Spanning "
            "Tree algorithm.",
        )
        if failure is not None:
            return failure
        if self.graph.is_directed:
            return self._require_directedness(
                MINIMUM_SPANNING_TREE, False, MAKE_UNDIRECTED
            )

        root = self.graph.selected_nodes[0]
        with self._view_only():
            tree = prim_mst(self.graph, root, directed=False)
        self.graph.deselect_all()
        return tree

    def kruskal_mst(self) -> Union[Path, DirectednessRequired]:
        """Minimum spanning forest of the whole graph; requires an undirected graph."""
        if self.graph.is_directed:
            return self._require_directedness(
                MINIMUM_SPANNING_TREE, False, MAKE_UNDIRECTED
            )

        with self._view_only():
            forest = kruskal_mst(self.graph)
        self.graph.deselect_all()
        return forest

    def max_flow(self) -> Union[MaxFlowResult, PreconditionFailed]:
        """Maximum flow from the first to the second selected node.

        Requires select mode and exactly two selected nodes. Flow values stay
        on the edges until the selection is cleared with ``reset_flow=True``.
        """
        failure = self._require_selection(
            FORD_FULKERSON,
            2,
            "Please select two nodes for calculating max flow before running the "
            "Ford-Fulkerson algorithm.",
        )
        if failure is not None:
            return failure

        source, sink = self.graph.selected_nodes
        with self._view_only():
            result = calc_max_flow(self.graph, source, sink)
        self.graph.deselect_all()

        self.graph.notify(
            f"{FORD_FULKERSON} Max Flow", f"The max flow is {result.sink_inbound_flow}."
        )
        return result

    def maximal_clique(self) -> Union[Optional[FrozenSet[NodeID]], PreconditionFailed]:
        """Largest maximal clique, highlighted on the graph when found.

        Requires at least two nodes. Returns None when every maximal clique is a
        single node.
        """
        if len(self.graph) < 2:
            return self._fail(
                BRON_KERBOSCH,
                "The graph must have 2 or more nodes in order for Bron-Kerbosch to run.",
            )

        directed = self.graph.is_directed and self.graph.config.clique_respects_direction
        with self._view_only():
            clique = find_maximal_clique(self.graph, directed=directed)

        if clique is None:
            self.graph.notify("Bron-Kerbosch", "No community could be found in the graph.")
            return None
        self.graph.highlight_nodes(clique)
        return clique

    def _require_selection(
        self, title: str, count: int, message: str
    ) -> Optional[PreconditionFailed]:
        if self.graph.mode != GraphMode.SELECT or len(self.graph.selected_nodes) != count:
            return self._fail(title, message)
        return None

    def _require_directedness(
        self, title: str, directed: bool, message: str
    ) -> DirectednessRequired:
        self.graph.notify(title, message)
        return DirectednessRequired(title=title, directed=directed, message=message)

    def _fail(self, title: str, message: str) -> PreconditionFailed:
        LOGGER.debug("%s not run: %s", title, message)
        self.graph.notify(title, message)
        return PreconditionFailed(title=title, message=message)

    @contextmanager
    def _view_only(self) -> Iterator[None]:
        """Hold the graph in view-only mode while an algorithm runs."""
        previous = self.graph.mode
        self.graph.mode = GraphMode.VIEW_ONLY
        try:
            yield
        finally:
            self.graph.mode = previous


def analyze(graph: Graph) -> AnalysisContext:
    """Create an analysis context for ``graph``.

    Example:
        >>> result = analyze(graph).kruskal_mst()
    """
    return AnalysisContext.from_graph(graph)
