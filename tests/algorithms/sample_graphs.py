import pytest

from bridges.model.graph import Graph
from bridges.templates import flow_network_example


@pytest.fixture
def triangle1():
    # Weight:
    #       [5]
    #   1 ───────► 2
    #   │          ▲
    #   │[2]       │[1]
    #   ▼          │
    #   3 ─────────┘
    g = Graph(directed=True)
    n1, n2, n3 = g.add_node(), g.add_node(), g.add_node()
    g.add_edge(n1, n2, weight=5)
    g.add_edge(n1, n3, weight=2)
    g.add_edge(n3, n2, weight=1)
    return g


@pytest.fixture
def diamond1():
    # Capacity:
    #        [5]     [3]
    #     ┌──────►2──────┐
    #     │       │      ▼
    #     1       │[3]   4
    #     │       ▼      ▲
    #     └──────►3──────┘
    #        [5]     [7]
    g = Graph(directed=True)
    flow_network_example(g)
    return g


@pytest.fixture
def k4():
    # Complete undirected graph on four nodes, weights 1..6.
    g = Graph(directed=False)
    nodes = [g.add_node() for _ in range(4)]
    weight = 1
    for i, a in enumerate(nodes):
        for b in nodes[i + 1 :]:
            g.add_edge(a, b, weight=weight)
            weight += 1
    return g


@pytest.fixture
def two_components():
    # A ─[1]─ B    C ─[2]─ D
    g = Graph(directed=False)
    a, b, c, d = (g.add_node() for _ in range(4))
    g.add_edge(a, b, weight=1)
    g.add_edge(c, d, weight=2)
    return g


@pytest.fixture
def square1():
    # Weight:
    #       [1]
    #   1 ─────── 2
    #   │ ╲       │
    #   │[4] ╲[2] │[3]
    #   │      ╲  │
    #   4 ─────── 3
    #       [5]
    g = Graph(directed=False)
    n1, n2, n3, n4 = (g.add_node() for _ in range(4))
    g.add_edge(n1, n2, weight=1)
    g.add_edge(n2, n3, weight=3)
    g.add_edge(n3, n4, weight=5)
    g.add_edge(n4, n1, weight=4)
    g.add_edge(n1, n3, weight=2)
    return g
