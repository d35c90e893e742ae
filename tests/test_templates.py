from bridges.model.graph import Graph
from bridges.templates import flow_network_example


def test_flow_network_layout():
    g = Graph()
    nodes = flow_network_example(g, center=(100.0, 50.0))

    assert [g.get_node(n).label for n in nodes] == ["1", "2", "3", "4"]
    assert [g.get_node(n).position for n in nodes] == [
        (-150.0, 50.0),
        (100.0, -150.0),
        (100.0, 250.0),
        (350.0, 50.0),
    ]


def test_flow_network_edges():
    g = Graph()
    n1, n2, n3, n4 = flow_network_example(g)
    assert [(e.start, e.end, e.weight) for e in g.edges] == [
        (n1, n2, 5),
        (n1, n3, 5),
        (n2, n3, 3),
        (n2, n4, 3),
        (n3, n4, 7),
    ]


def test_flow_network_replaces_contents():
    g = Graph()
    for _ in range(3):
        g.add_node()
    g.select(g.node_ids[0])

    flow_network_example(g)

    assert len(g) == 4
    assert len(g.edges) == 5
    assert g.selected_nodes == []
    g.check_integrity()
