"""Pre-built example graphs."""

from __future__ import annotations

from typing import List, Tuple

from bridges.model.graph import Graph
from bridges.types.base import NodeID, Position

# Diamond flow network: (start index, end index, capacity)
FLOW_NETWORK_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 5),
    (0, 2, 5),
    (1, 2, 3),
    (1, 3, 3),
    (2, 3, 7),
)


def flow_network_example(
    graph: Graph, center: Position = (0.0, 0.0)
) -> List[NodeID]:
    """Replace the graph's contents with a four-node flow network.

    Node 1 sits left of ``center``, nodes 2 and 3 above and below it, node 4
    to the right.

    Args:
        graph: Graph to clear and populate.
        center: Point the layout is arranged around.

    Returns:
        Handles of nodes 1-4 in label order.
    """
    graph.clear()

    x, y = center
    offsets = ((-250.0, 0.0), (0.0, -200.0), (0.0, 200.0), (250.0, 0.0))
    nodes = [graph.add_node((x + dx, y + dy)) for dx, dy in offsets]

    for start, end, capacity in FLOW_NETWORK_EDGES:
        graph.add_edge(nodes[start], nodes[end], weight=capacity)
    return nodes
