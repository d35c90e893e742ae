"""Graph elements: Node and Edge.

Both are plain records owned by a :class:`bridges.model.graph.Graph`. They refer
to each other through integer handles into the graph's stores, never through
object references.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Set

from bridges.types.base import EdgeID, NodeID, Position, Weight


@dataclass
class Node:
    """A graph vertex.

    Attributes:
        id: Handle of the node within its graph.
        label: Display label, a 1-based sequence number by default.
        color: Palette color assigned at creation.
        position: Placement point supplied by the caller.
        selected: Whether the node is part of the current selection.
        highlighted: Whether the node is currently highlighted.
        highlight_color: Color used while highlighted (None for the default).
        edges: Handles of incident edges, both outgoing and incoming.
    """

    id: NodeID
    label: str
    color: str
    position: Position = (0.0, 0.0)
    selected: bool = False
    highlighted: bool = False
    highlight_color: Optional[str] = None
    edges: Set[EdgeID] = field(default_factory=set)

    def __str__(self) -> str:
        return f"Node {self.label}"


@dataclass
class Edge:
    """A directed connection between two nodes.

    In an undirected graph the orientation is kept but ignored by undirected
    queries.

    Attributes:
        id: Handle of the edge within its graph.
        start: Handle of the start node.
        end: Handle of the end node.
        weight: Integer weight, doubling as capacity for max flow.
        flow: Flow assigned by max flow, or None when not computed.
        highlighted: Whether the edge is currently highlighted.
        highlight_color: Color used while highlighted (None for the default).
    """

    id: EdgeID
    start: NodeID
    end: NodeID
    weight: Weight = 1
    flow: Optional[int] = None
    highlighted: bool = False
    highlight_color: Optional[str] = None

    @property
    def residual_capacity(self) -> Optional[int]:
        """Remaining capacity (weight - flow), or None when flow is unset."""
        if self.flow is None:
            return None
        return self.weight - self.flow

    def other(self, node: NodeID) -> NodeID:
        """Return the endpoint opposite to ``node``.

        Raises:
            ValueError: If ``node`` is not an endpoint of this edge.
        """
        if node == self.start:
            return self.end
        if node == self.end:
            return self.start
        raise ValueError(f"Node '{node}' is not an endpoint of edge '{self.id}'.")

    def connects(self, a: NodeID, b: NodeID, directed: bool = True) -> bool:
        """Check whether the edge joins ``a`` to ``b``.

        Args:
            a: Candidate start node.
            b: Candidate end node.
            directed: If False, orientation is ignored.
        """
        if self.start == a and self.end == b:
            return True
        return not directed and self.start == b and self.end == a

    def reverse(self) -> None:
        """Swap start and end nodes."""
        self.start, self.end = self.end, self.start
