"""Tests for the selection-driven AnalysisContext entry points."""

import pytest

from bridges.analysis import AnalysisContext, analyze
from bridges.analysis.context import (
    BRON_KERBOSCH,
    FORD_FULKERSON,
    MINIMUM_SPANNING_TREE,
    SHORTEST_PATH,
)
from bridges.config import GraphConfig
from bridges.model.graph import Graph
from bridges.model.path import Path
from bridges.types.base import GraphMode
from bridges.types.dto import (
    DirectednessRequired,
    MaxFlowResult,
    NotFound,
    PreconditionFailed,
    ShortestPathResult,
)


class Recorder:
    def __init__(self):
        self.messages = []

    def __call__(self, title, message):
        self.messages.append((title, message))


@pytest.fixture
def recorder(triangle1):
    rec = Recorder()
    triangle1.notifier = rec
    return rec


def select(graph, *nodes):
    graph.mode = GraphMode.SELECT
    for node in nodes:
        graph.select(node)


def test_context_creation(triangle1):
    ctx = AnalysisContext.from_graph(triangle1)
    assert ctx.graph is triangle1
    assert analyze(triangle1).graph is triangle1


class TestShortestPath:
    def test_runs_on_selection(self, triangle1):
        n1, n2, n3 = triangle1.node_ids
        select(triangle1, n1, n2)

        result = analyze(triangle1).shortest_path()

        assert isinstance(result, ShortestPathResult)
        assert result.path.nodes == [n1, n3, n2]
        assert result.path.weight == 3
        assert triangle1.selected_nodes == []
        assert triangle1.mode == GraphMode.SELECT

    def test_requires_two_selected_nodes(self, triangle1, recorder):
        select(triangle1, triangle1.node_ids[0])

        result = analyze(triangle1).shortest_path()

        assert isinstance(result, PreconditionFailed)
        assert result.title == SHORTEST_PATH
        assert recorder.messages == [(result.title, result.message)]
        assert triangle1.selected_nodes == [triangle1.node_ids[0]]

    def test_requires_select_mode(self, triangle1):
        n1, n2, _ = triangle1.node_ids
        triangle1.select(n1)
        triangle1.select(n2)
        assert triangle1.mode == GraphMode.NODES

        assert isinstance(analyze(triangle1).shortest_path(), PreconditionFailed)

    def test_directedness_gate(self, triangle1, recorder):
        n1, n2, n3 = triangle1.node_ids
        triangle1.set_directed(False)
        select(triangle1, n1, n2)

        gate = analyze(triangle1).shortest_path()
        assert isinstance(gate, DirectednessRequired)
        assert gate.directed is True
        assert triangle1.selected_nodes == [n1, n2]
        assert recorder.messages[-1][0] == SHORTEST_PATH

        triangle1.set_directed(gate.directed)
        result = analyze(triangle1).shortest_path()
        assert result.path.nodes == [n1, n3, n2]

    def test_not_found(self, triangle1, recorder):
        n1, n2, _ = triangle1.node_ids
        select(triangle1, n2, n1)

        result = analyze(triangle1).shortest_path()

        assert result == NotFound(n2, n1)
        assert recorder.messages == [
            (SHORTEST_PATH, "No path found from Node 2 to Node 1.")
        ]
        assert triangle1.selected_nodes == []


class TestSpanningTrees:
    def test_prim_on_selected_root(self, square1):
        select(square1, square1.node_ids[0])
        tree = analyze(square1).prim_mst()
        assert isinstance(tree, Path)
        assert tree.weight == 7
        assert square1.selected_nodes == []

    def test_prim_requires_one_selected_node(self, square1):
        select(square1, *square1.node_ids[:2])
        result = analyze(square1).prim_mst()
        assert isinstance(result, PreconditionFailed)
        assert result.title == MINIMUM_SPANNING_TREE

    def test_prim_directedness_gate(self, triangle1):
        select(triangle1, triangle1.node_ids[0])
        gate = analyze(triangle1).prim_mst()
        assert isinstance(gate, DirectednessRequired)
        assert gate.directed is False

        triangle1.set_directed(gate.directed)
        tree = analyze(triangle1).prim_mst()
        assert tree.weight == 3

    def test_kruskal_needs_no_selection(self, square1):
        square1.mode = GraphMode.EDGES
        tree = analyze(square1).kruskal_mst()
        assert len(tree.edges) == len(square1) - 1
        assert square1.mode == GraphMode.EDGES

    def test_kruskal_directedness_gate(self, triangle1):
        gate = analyze(triangle1).kruskal_mst()
        assert isinstance(gate, DirectednessRequired)
        assert gate.title == MINIMUM_SPANNING_TREE


class TestMaxFlow:
    def test_runs_and_announces(self, diamond1):
        rec = Recorder()
        diamond1.notifier = rec
        n1, _, _, n4 = diamond1.node_ids
        select(diamond1, n1, n4)

        result = analyze(diamond1).max_flow()

        assert isinstance(result, MaxFlowResult)
        assert result.flow_value == 10
        assert rec.messages == [(f"{FORD_FULKERSON} Max Flow", "The max flow is 10.")]
        assert diamond1.selected_nodes == []
        assert all(edge.flow is not None for edge in diamond1.edges)

    def test_works_on_undirected_graph(self, diamond1):
        _, n2, _, n4 = diamond1.node_ids
        diamond1.set_directed(False)
        select(diamond1, n2, n4)
        assert analyze(diamond1).max_flow().flow_value == 6

    def test_requires_two_selected_nodes(self, diamond1):
        diamond1.mode = GraphMode.SELECT
        result = analyze(diamond1).max_flow()
        assert isinstance(result, PreconditionFailed)
        assert result.title == FORD_FULKERSON

    def test_highlight_schedule(self, diamond1):
        _, n2, _, n4 = diamond1.node_ids
        select(diamond1, n2, n4)
        steps = analyze(diamond1).max_flow().highlight_steps()
        assert [(s.delay, s.highlighted) for s in steps] == [
            (0, True),
            (1, True),
            (2, False),
            (2, False),
            (4, True),
            (6, False),
        ]


class TestMaximalClique:
    def test_highlights_clique(self, k4):
        clique = analyze(k4).maximal_clique()
        assert clique == frozenset(k4.node_ids)
        assert all(node.highlighted for node in k4.nodes)

    def test_needs_two_nodes(self):
        rec = Recorder()
        g = Graph(notifier=rec)
        g.add_node()
        result = analyze(g).maximal_clique()
        assert isinstance(result, PreconditionFailed)
        assert result.title == BRON_KERBOSCH
        assert len(rec.messages) == 1

    def test_no_community(self):
        rec = Recorder()
        g = Graph(notifier=rec)
        g.add_node()
        g.add_node()
        assert analyze(g).maximal_clique() is None
        assert rec.messages == [
            ("Bron-Kerbosch", "No community could be found in the graph.")
        ]

    def test_ignores_direction_by_default(self, triangle1):
        assert analyze(triangle1).maximal_clique() == frozenset(triangle1.node_ids)

    def test_direction_policy(self, triangle1):
        n1, n2, _ = triangle1.node_ids
        triangle1.config = GraphConfig(clique_respects_direction=True)
        assert analyze(triangle1).maximal_clique() == frozenset({n1, n2})


def test_view_only_while_running(triangle1, monkeypatch):
    seen = []

    def fake_search(graph, origin, target, directed=True):
        seen.append(graph.mode)
        return None

    monkeypatch.setattr("bridges.analysis.context.find_shortest_path", fake_search)
    n1, n2, _ = triangle1.node_ids
    select(triangle1, n1, n2)
    analyze(triangle1).shortest_path()

    assert seen == [GraphMode.VIEW_ONLY]
    assert triangle1.mode == GraphMode.SELECT
