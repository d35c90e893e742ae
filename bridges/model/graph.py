"""Mutable directed/undirected graph with selection state.

The graph owns every Node and Edge in two insertion-ordered stores keyed by
integer handles. Elements reference each other only through those handles, so
deleting an element is a matter of removing its handle from the stores and from
the incident sets of its neighbors.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from bridges.config import DEFAULT_CONFIG, GraphConfig
from bridges.logging import get_logger, log_notifier
from bridges.model.elements import Edge, Node
from bridges.types.base import EdgeID, GraphMode, NodeID, Notifier, Position, Weight
from bridges.types.dto import HighlightStep

LOGGER = get_logger(__name__)


class Graph:
    """A graph of nodes and weighted edges driven by an interactive editor.

    This class enforces:
      - Edges only between two distinct, existing nodes.
      - At most one edge per unordered pair when undirected, and at most one
        edge per ordered pair when directed (see :meth:`can_connect`).
      - Node deletion cascades to incident edges and to the selection.
      - Invalid handles raise ValueError.

    Attributes:
        config: Policies for colors, default weights and algorithm behavior.
        mode: Operational state set by the surrounding application.
        notifier: Callback receiving (title, message) announcements.
        color_cycle: Palette position of the next created node.
    """

    def __init__(
        self,
        directed: bool = True,
        config: Optional[GraphConfig] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.config: GraphConfig = config if config is not None else DEFAULT_CONFIG
        self.mode: GraphMode = GraphMode.NODES
        self.notifier: Notifier = notifier if notifier is not None else log_notifier
        self.color_cycle = 0

        self._directed = directed
        self._nodes: Dict[NodeID, Node] = {}
        self._edges: Dict[EdgeID, Edge] = {}
        self._selected: List[NodeID] = []
        self._next_node_id: NodeID = 0
        self._next_edge_id: EdgeID = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, nodes={len(self._nodes)}, edges={len(self._edges)})"

    #
    # Stores
    #
    @property
    def nodes(self) -> List[Node]:
        """All nodes in insertion order."""
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        """All edges in creation order."""
        return list(self._edges.values())

    @property
    def node_ids(self) -> List[NodeID]:
        return list(self._nodes)

    @property
    def edge_ids(self) -> List[EdgeID]:
        return list(self._edges)

    def get_node(self, node: NodeID) -> Node:
        """Return the node for a handle.

        Raises:
            ValueError: If the node does not exist.
        """
        try:
            return self._nodes[node]
        except KeyError:
            raise ValueError(f"Node '{node}' does not exist.") from None

    def get_edge(self, edge: EdgeID) -> Edge:
        """Return the edge for a handle.

        Raises:
            ValueError: If the edge does not exist.
        """
        try:
            return self._edges[edge]
        except KeyError:
            raise ValueError(f"Edge with id='{edge}' not found.") from None

    def has_edge_by_id(self, edge: EdgeID) -> bool:
        return edge in self._edges

    def describe_edge(self, edge: EdgeID) -> str:
        """Return a readable form of an edge, e.g. ``"1 → 2"``."""
        e = self.get_edge(edge)
        return f"{self._nodes[e.start].label} → {self._nodes[e.end].label}"

    #
    # Directedness
    #
    @property
    def is_directed(self) -> bool:
        return self._directed

    @is_directed.setter
    def is_directed(self, directed: bool) -> None:
        self.set_directed(directed)

    def set_directed(self, directed: bool) -> None:
        """Switch the whole graph between directed and undirected interpretation.

        Edges keep their orientation; only queries and algorithms change view.
        Going undirected merges each pair of opposite edges into one, keeping
        the lighter edge (the older one on equal weights).
        """
        if directed != self._directed:
            LOGGER.debug("Graph made %s", "directed" if directed else "undirected")
        self._directed = directed
        if not directed:
            self._merge_antiparallel_edges()

    def _merge_antiparallel_edges(self) -> None:
        for edge in self.edges:
            if edge.id not in self._edges:
                continue
            parallel = self.edges_between(edge.start, edge.end, directed=False)
            if len(parallel) < 2:
                continue
            keep = min(parallel, key=lambda e: e.weight)
            for other in parallel:
                if other.id != keep.id:
                    LOGGER.debug(
                        "Merged edge %s into %s",
                        self.describe_edge(other.id),
                        self.describe_edge(keep.id),
                    )
                    self.remove_edge(other.id)

    #
    # Node management
    #
    def add_node(self, position: Position = (0.0, 0.0)) -> NodeID:
        """Create a node labelled with the next sequence number.

        Args:
            position: Placement point of the node.

        Returns:
            The handle of the new node.
        """
        node = Node(
            id=self._next_node_id,
            label=str(len(self._nodes) + 1),
            color=self.config.color_for(self.color_cycle),
            position=position,
        )
        self._next_node_id += 1
        self._nodes[node.id] = node
        self.color_cycle = self.config.next_cycle(self.color_cycle)
        return node.id

    def delete_node(self, node: NodeID) -> None:
        """Delete a node after removing all of its edges.

        Raises:
            ValueError: If the node does not exist.
        """
        n = self.get_node(node)
        for edge_id in sorted(n.edges):
            self.remove_edge(edge_id)
        if node in self._selected:
            self._selected.remove(node)
        del self._nodes[node]

    def delete_selected_nodes(self) -> None:
        """Delete every selected node and its edges."""
        if not self._selected:
            return
        for node in list(self._selected):
            self.delete_node(node)
        self._selected.clear()

    def renumber_nodes(self) -> None:
        """Relabel every node by its current position, starting at 1."""
        if not self._nodes:
            self.notify("Renumber Nodes", "There are no nodes to renumber.")
            return
        for index, node in enumerate(self._nodes.values()):
            node.label = str(index + 1)

    #
    # Edge management
    #
    def can_connect(self, a: NodeID, b: NodeID, directed: Optional[bool] = None) -> bool:
        """Decide whether a new edge from ``a`` to ``b`` is allowed.

        This is the single place where the no-duplicate rule lives:
          - never between a node and itself;
          - undirected: at most one edge per unordered pair;
          - directed: at most one edge per ordered pair, and ``b -> a`` blocks
            ``a -> b`` unless ``config.allow_antiparallel_edges`` is set.

        Args:
            a: Prospective start node.
            b: Prospective end node.
            directed: Rule set to apply; defaults to the graph's own flag.
        """
        if a == b:
            return False
        if directed is None:
            directed = self._directed
        if not directed:
            return self.edge(a, b, directed=False) is None
        if self.edge(a, b, directed=True) is not None:
            return False
        if self.config.allow_antiparallel_edges:
            return True
        return self.edge(b, a, directed=True) is None

    def add_edge(
        self, a: NodeID, b: NodeID, weight: Optional[Weight] = None
    ) -> Optional[EdgeID]:
        """Connect ``a`` to ``b`` and clear the selection.

        Identical or already-connected endpoints are a silent no-op.

        Args:
            a: Start node.
            b: End node.
            weight: Initial weight; defaults to ``config.default_weight``.

        Returns:
            Handle of the new edge, or None if nothing was added.

        Raises:
            ValueError: If either node does not exist.
        """
        start = self.get_node(a)
        end = self.get_node(b)

        edge_id: Optional[EdgeID] = None
        if self.can_connect(a, b):
            edge = Edge(
                id=self._next_edge_id,
                start=a,
                end=b,
                weight=self.config.default_weight if weight is None else weight,
            )
            self._next_edge_id += 1
            self._edges[edge.id] = edge
            start.edges.add(edge.id)
            end.edges.add(edge.id)
            edge_id = edge.id
        else:
            LOGGER.debug("Ignored edge from %s to %s: not connectable", start, end)

        self.deselect_all()
        return edge_id

    def remove_edge(self, edge: EdgeID) -> None:
        """Remove an edge and deregister it from both endpoints.

        Raises:
            ValueError: If the edge does not exist.
        """
        e = self.get_edge(edge)
        self._nodes[e.start].edges.discard(edge)
        self._nodes[e.end].edges.discard(edge)
        del self._edges[edge]

    def remove_selected_edge(self) -> bool:
        """Remove the selected edge, keeping both endpoints selected.

        Returns:
            True if an edge was removed.
        """
        edge = self.selected_edge
        if edge is None:
            return False
        self.remove_edge(edge.id)
        return True

    def remove_all_edges(self) -> None:
        for node in self._nodes.values():
            node.edges.clear()
        self._edges.clear()

    def reverse_edge(self, edge: EdgeID) -> bool:
        """Flip the orientation of an edge if the reversed pair is free.

        Returns:
            True if the edge was reversed.
        """
        e = self.get_edge(edge)
        if self._directed and self.edge(e.end, e.start, directed=True) is not None:
            return False
        e.reverse()
        return True

    def set_edge_weight(self, edge: EdgeID, weight: Weight) -> None:
        self.get_edge(edge).weight = weight

    def shift_selected_edge_weight(self, by: int) -> Optional[Weight]:
        """Shift the selected edge's weight by ``by``.

        Returns:
            The new weight, or None if no edge is selected.
        """
        edge = self.selected_edge
        if edge is None:
            return None
        edge.weight += by
        return edge.weight

    def reset_all_edge_weights(self, weight: Optional[Weight] = None) -> None:
        """Set every edge to ``weight`` (the configured default when omitted)."""
        if weight is None:
            weight = self.config.default_weight
        for edge in self._edges.values():
            edge.weight = weight

    def reset_flow(self) -> None:
        """Forget any flow computed on the edges."""
        for edge in self._edges.values():
            edge.flow = None

    def clear(self) -> None:
        """Empty nodes, edges and selection and reset the color cycle.

        Handles keep counting up, so stale handles never alias new elements.
        """
        self._nodes.clear()
        self._edges.clear()
        self._selected.clear()
        self.color_cycle = 0

    #
    # Selection
    #
    @property
    def selected_nodes(self) -> List[NodeID]:
        """Selected nodes in selection order."""
        return list(self._selected)

    @property
    def selected_edge(self) -> Optional[Edge]:
        """The edge joining exactly two selected nodes, if any."""
        if len(self._selected) != 2:
            return None
        return self.edge(self._selected[0], self._selected[1], directed=self._directed)

    def select(self, node: NodeID) -> bool:
        """Toggle a node's membership in the selection.

        Returns:
            True if the node is selected afterwards.
        """
        n = self.get_node(node)
        if node in self._selected:
            self._selected.remove(node)
            n.selected = False
        else:
            self._selected.append(node)
            n.selected = True
        return n.selected

    def deselect_all(self, unhighlight: bool = False, reset_flow: bool = False) -> None:
        """Clear the selection.

        Args:
            unhighlight: Also clear highlight state on all nodes and edges.
            reset_flow: Also forget flow values on all edges.
        """
        for node in self._selected:
            self._nodes[node].selected = False
        self._selected.clear()

        if reset_flow:
            self.reset_flow()
        if unhighlight:
            self.unhighlight_all()

    #
    # Adjacency queries
    #
    def incident_edges(self, node: NodeID) -> List[Edge]:
        """Edges touching ``node``, in creation order."""
        return [self._edges[e] for e in sorted(self.get_node(node).edges)]

    def edge(self, a: NodeID, b: NodeID, directed: bool = True) -> Optional[Edge]:
        """Find an edge between two nodes.

        Args:
            a: Start node.
            b: End node.
            directed: If True, only ``a -> b`` matches; otherwise any edge
                incident to ``a`` whose other endpoint is ``b``.

        Returns:
            The first matching edge in creation order, or None.
        """
        for e in self.incident_edges(a):
            if e.connects(a, b, directed):
                return e
        return None

    def edges_between(self, a: NodeID, b: NodeID, directed: bool = True) -> List[Edge]:
        """All edges between two nodes, in creation order."""
        return [e for e in self.incident_edges(a) if e.connects(a, b, directed)]

    def adjacent_nodes(self, node: NodeID, directed: bool = True) -> List[NodeID]:
        """Neighbors of ``node`` in edge creation order.

        Args:
            node: Node whose neighbors are requested.
            directed: If True, only successors (``node`` is the start node);
                otherwise neighbors regardless of orientation.
        """
        result: List[NodeID] = []
        for e in self.incident_edges(node):
            if e.start == node:
                other = e.end
            elif not directed:
                other = e.start
            else:
                continue
            if other not in result:
                result.append(other)
        return result

    def is_adjacent(self, a: NodeID, b: NodeID, directed: bool = True) -> bool:
        return b in self.adjacent_nodes(a, directed=directed)

    def cheapest_edge(self, node: NodeID, directed: bool = False) -> Optional[Edge]:
        """Lowest-weight edge at ``node``; outgoing only when ``directed``."""
        candidates = [
            e for e in self.incident_edges(node) if not directed or e.start == node
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda e: e.weight)

    def inbound_flow(self, node: NodeID) -> int:
        """Total flow on edges ending at ``node`` (unset flow counts as 0)."""
        return sum(e.flow or 0 for e in self.incident_edges(node) if e.end == node)

    def outbound_flow(self, node: NodeID) -> int:
        """Total flow on edges starting at ``node`` (unset flow counts as 0)."""
        return sum(e.flow or 0 for e in self.incident_edges(node) if e.start == node)

    #
    # Highlighting
    #
    def apply_highlight(self, step: HighlightStep) -> None:
        """Apply one highlight step; steps for deleted edges are skipped."""
        edge = self._edges.get(step.edge)
        if edge is None:
            return
        edge.highlighted = step.highlighted
        edge.highlight_color = step.color if step.highlighted else None
        for node in step.nodes:
            if node in self._nodes:
                self._nodes[node].highlighted = step.highlighted
                self._nodes[node].highlight_color = (
                    step.color if step.highlighted else None
                )

    def highlight_nodes(self, nodes: Iterable[NodeID], color: Optional[str] = None) -> None:
        for node in nodes:
            n = self.get_node(node)
            n.highlighted = True
            n.highlight_color = color

    def unhighlight_all(self) -> None:
        for node in self._nodes.values():
            node.highlighted = False
            node.highlight_color = None
        for edge in self._edges.values():
            edge.highlighted = False
            edge.highlight_color = None

    #
    # Notifications and integrity
    #
    def notify(self, title: str, message: str) -> None:
        """Send an announcement to the notifier callback."""
        self.notifier(title, message)

    def check_integrity(self) -> None:
        """Assert that node and edge stores reference each other consistently."""
        for node_id, node in self._nodes.items():
            for edge_id in node.edges:
                assert edge_id in self._edges, f"{node} references missing edge {edge_id}"
                edge = self._edges[edge_id]
                assert node_id in (edge.start, edge.end), (
                    f"{node} lists edge {edge_id} that does not touch it"
                )
        for edge_id, edge in self._edges.items():
            for endpoint in (edge.start, edge.end):
                assert endpoint in self._nodes, f"Edge {edge_id} has dangling node {endpoint}"
                assert edge_id in self._nodes[endpoint].edges, (
                    f"Edge {edge_id} is not registered on node {endpoint}"
                )
        for node_id in self._selected:
            assert node_id in self._nodes, f"Selection holds deleted node {node_id}"
