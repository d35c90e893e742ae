"""Maximum flow via Ford-Fulkerson with depth-first augmenting paths.

Edge weights double as capacities. Each augmenting path may use an edge
forward (spare capacity, walking start to end) or backward (cancelling flow,
walking end to start). The search is plain DFS rather than BFS, so the number
of augmentations is bounded by the flow value, not by the graph size.
"""

from __future__ import annotations

from typing import List, Optional

from bridges.logging import get_logger
from bridges.model.graph import Graph
from bridges.model.path import Path
from bridges.types.base import NodeID
from bridges.types.dto import MaxFlowResult

LOGGER = get_logger(__name__)


def init_flow(graph: Graph) -> Graph:
    """Set the flow of every edge to zero.

    Returns:
        The same graph instance.
    """
    for edge in graph.edges:
        edge.flow = 0
    return graph


def find_augmenting_path(
    graph: Graph,
    source: NodeID,
    sink: NodeID,
    path: Optional[Path] = None,
) -> Optional[Path]:
    """Depth-first search for a path that can carry more flow to ``sink``.

    Incident edges are tried in creation order, skipping edges already on the
    path. Backward edges are recorded in the returned path's
    ``backward_edges``.

    Args:
        graph: Graph whose edges all carry a flow value.
        source: Node the walk currently stands on.
        sink: Node the walk must reach.
        path: Walk so far; a new empty path when omitted.

    Returns:
        The augmenting path, or None if ``sink`` cannot be reached.
    """
    if path is None:
        path = Path(graph, nodes=[source])
    if source == sink:
        return path

    for edge in graph.incident_edges(source):
        if path.contains_edge(edge.id):
            continue

        if edge.start == source and edge.residual_capacity > 0:
            forward = path.copy()
            forward.append_edge(edge.id)
            result = find_augmenting_path(graph, edge.end, sink, forward)
            if result is not None:
                return result

        if edge.end == source and edge.flow > 0:
            backward = path.copy()
            backward.append_edge(edge.id, backward=True)
            result = find_augmenting_path(graph, edge.start, sink, backward)
            if result is not None:
                return result

    return None


def augment(path: Path, amount: int) -> None:
    """Push ``amount`` along ``path``: forward edges gain it, backward edges lose it."""
    for edge_id in path.edges:
        edge = path.graph.get_edge(edge_id)
        if edge_id in path.backward_edges:
            edge.flow -= amount
        else:
            edge.flow += amount


def check_flow_conservation(graph: Graph, source: NodeID, sink: NodeID) -> None:
    """Assert inbound flow equals outbound flow on every node but source and sink."""
    for node in graph.nodes:
        if node.id in (source, sink):
            continue
        inbound = graph.inbound_flow(node.id)
        outbound = graph.outbound_flow(node.id)
        assert inbound == outbound, (
            f"{node}'s inbound flow was {inbound} but its outbound flow was {outbound}."
        )


def calc_max_flow(graph: Graph, source: NodeID, sink: NodeID) -> MaxFlowResult:
    """Compute the maximum flow from ``source`` to ``sink``.

    The flow assignment is left on the edges for display. Call
    ``Graph.reset_flow`` to discard it.

    Args:
        graph: Graph whose edge weights are capacities.
        source: Flow origin.
        sink: Flow destination.

    Returns:
        Total flow, the sink's inbound flow and the augmenting paths applied.

    Raises:
        ValueError: If either node does not exist.
    """
    graph.get_node(source)
    graph.get_node(sink)
    init_flow(graph)

    paths: List[Path] = []
    total = 0
    if source != sink:
        while True:
            path = find_augmenting_path(graph, source, sink)
            if path is None:
                break
            amount = path.residual_capacity
            augment(path, amount)
            total += amount
            paths.append(path)
            LOGGER.debug("Augmented %d along edges %s", amount, path.edges)

    if graph.config.check_flow_conservation:
        check_flow_conservation(graph, source, sink)

    sink_inbound = graph.inbound_flow(sink)
    LOGGER.debug("Max flow %s -> %s is %d", source, sink, total)
    return MaxFlowResult(
        flow_value=total,
        sink_inbound_flow=sink_inbound,
        augmenting_paths=tuple(paths),
    )
