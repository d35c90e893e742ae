"""Ordered accumulator of nodes and edges.

A Path serves both as the working set of the recursive algorithms and as the
result handed back to the caller for highlighting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional, Set

from bridges.model.elements import Edge
from bridges.types.base import EdgeID, NodeID, Weight
from bridges.types.dto import HighlightStep

if TYPE_CHECKING:
    from bridges.model.graph import Graph


@dataclass
class Path:
    """A walk (or an edge set, for spanning trees) over a graph.

    Attributes:
        graph: The graph the handles belong to.
        nodes: Walk nodes in order. Edges appended with
            ``extend_nodes=False`` do not contribute here.
        edges: Edges in the order they were appended.
        backward_edges: Edges traversed against their orientation, whose flow
            is cancelled rather than increased during max flow.

    Edges deleted from the graph after they were appended are skipped by
    membership, weight and highlighting queries.
    """

    graph: Graph = field(repr=False, compare=False)
    nodes: List[NodeID] = field(default_factory=list)
    edges: List[EdgeID] = field(default_factory=list)
    backward_edges: Set[EdgeID] = field(default_factory=set)

    @classmethod
    def from_nodes(cls, graph: Graph, nodes: List[NodeID]) -> Path:
        """Build a walk by resolving the directed edge between consecutive nodes."""
        path = cls(graph)
        for node in nodes:
            path.append_node(node)
        return path

    @classmethod
    def from_edges(cls, graph: Graph, edges: List[EdgeID]) -> Path:
        """Build an edge-set path without a node sequence."""
        path = cls(graph)
        for edge in edges:
            path.append_edge(edge, extend_nodes=False)
        return path

    def copy(self) -> Path:
        """Return a new Path with fresh containers over the same handles."""
        return Path(
            self.graph,
            list(self.nodes),
            list(self.edges),
            set(self.backward_edges),
        )

    def __iter__(self) -> Iterator[EdgeID]:
        return iter(self.edges)

    def __contains__(self, node: object) -> bool:
        """Membership by node identity: a walk node or any edge endpoint."""
        if node in self.nodes:
            return True
        return any(node in (edge.start, edge.end) for edge in self._resolve())

    def contains_edge(self, edge: EdgeID) -> bool:
        return edge in self.edges

    @property
    def first(self) -> Optional[NodeID]:
        if self.nodes:
            return self.nodes[0]
        edges = self._resolve()
        return edges[0].start if edges else None

    @property
    def last(self) -> Optional[NodeID]:
        if self.nodes:
            return self.nodes[-1]
        edges = self._resolve()
        return edges[-1].end if edges else None

    @property
    def length(self) -> int:
        """Number of nodes along the path (edge count + 1)."""
        return len(self.edges) + 1

    @property
    def is_loop(self) -> bool:
        return bool(self.edges) and self.first == self.last

    @property
    def weight(self) -> Weight:
        """Aggregate weight of all edges."""
        return sum(edge.weight for edge in self._resolve())

    @property
    def residual_capacity(self) -> Optional[int]:
        """Amount of flow the path can still carry.

        Forward edges offer their residual capacity, backward edges offer the
        flow they currently carry. None if the path is empty or any edge has no
        flow assigned.
        """
        edges = self._resolve()
        if not edges:
            return None
        available: List[int] = []
        for edge in edges:
            if edge.flow is None:
                return None
            if edge.id in self.backward_edges:
                available.append(edge.flow)
            else:
                available.append(edge.weight - edge.flow)
        return min(available)

    def node_labels(self) -> List[str]:
        return [self.graph.get_node(n).label for n in self.nodes]

    def append_node(self, node: NodeID, directed: bool = True) -> None:
        """Extend the walk to ``node`` through the edge from the current last node.

        Args:
            node: Node to append.
            directed: If False, an edge pointing the other way also connects.

        Raises:
            ValueError: If no edge joins the last node to ``node``.
        """
        if self.nodes:
            edge = self.graph.edge(self.nodes[-1], node, directed=directed)
            if edge is None:
                raise ValueError(
                    f"No edge from '{self.nodes[-1]}' to '{node}' to extend the path."
                )
            self.edges.append(edge.id)
        self.nodes.append(node)

    def append_edge(
        self, edge: EdgeID, extend_nodes: bool = True, backward: bool = False
    ) -> None:
        """Append an edge.

        Args:
            edge: Edge to append.
            extend_nodes: Also extend the node sequence with the edge's far
                endpoint (and its near endpoint if the walk is empty).
            backward: Record the edge as traversed against its orientation.
        """
        e = self.graph.get_edge(edge)
        self.edges.append(edge)
        if backward:
            self.backward_edges.add(edge)
        if extend_nodes:
            near, far = (e.end, e.start) if backward else (e.start, e.end)
            if not self.nodes:
                self.nodes.append(near)
            self.nodes.append(far)

    def same_route(self, other: Path) -> bool:
        """Check whether two paths consist of the same edges in the same order."""
        return self.edges == other.edges

    def highlight_steps(
        self, wait: int = 0, duration: Optional[int] = None, color: Optional[str] = None
    ) -> List[HighlightStep]:
        """Time-ordered highlight schedule for this path.

        Edge ``i`` is highlighted at ``wait + i``. When ``duration`` is given,
        every edge is restored at ``wait + duration``.
        """
        edges = self._resolve()
        steps: List[HighlightStep] = []
        for index, edge in enumerate(edges):
            steps.append(
                HighlightStep(wait + index, edge.id, (edge.start, edge.end), True, color)
            )
        if duration is not None:
            for edge in edges:
                steps.append(
                    HighlightStep(wait + duration, edge.id, (edge.start, edge.end), False)
                )
        steps.sort(key=lambda step: step.delay)
        return steps

    def outline(
        self,
        visit: Callable[[HighlightStep], None],
        wait: int = 0,
        duration: Optional[int] = None,
        color: Optional[str] = None,
    ) -> None:
        """Feed the highlight schedule to ``visit`` in order, without waiting."""
        for step in self.highlight_steps(wait=wait, duration=duration, color=color):
            visit(step)

    def _resolve(self) -> List[Edge]:
        """Edges still present in the graph, in path order."""
        return [
            self.graph.get_edge(e) for e in self.edges if self.graph.has_edge_by_id(e)
        ]
