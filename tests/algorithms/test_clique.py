import networkx as nx

from bridges.algorithms.clique import CliqueSearch, bron_kerbosch, find_maximal_clique
from bridges.lib.nx import to_networkx
from bridges.model.graph import Graph


def test_k4_returns_all_nodes(k4):
    assert find_maximal_clique(k4) == frozenset(k4.node_ids)


def test_largest_clique_wins():
    # Triangle a-b-c plus a pendant edge c-d
    g = Graph(directed=False)
    a, b, c, d = (g.add_node() for _ in range(4))
    g.add_edge(a, b)
    g.add_edge(b, c)
    g.add_edge(c, a)
    g.add_edge(c, d)
    assert find_maximal_clique(g) == frozenset({a, b, c})


def test_first_found_wins_ties(two_components):
    a, b, _, _ = two_components.node_ids
    assert find_maximal_clique(two_components) == frozenset({a, b})


def test_no_edges_returns_none():
    g = Graph()
    g.add_node()
    g.add_node()
    assert find_maximal_clique(g) is None


def test_empty_graph_returns_none():
    assert find_maximal_clique(Graph()) is None


def test_directed_view_uses_successors_only(triangle1):
    n1, n2, _ = triangle1.node_ids
    # Node 2 has no successors, so nothing can extend {1, 2}
    assert find_maximal_clique(triangle1, directed=True) == frozenset({n1, n2})
    assert find_maximal_clique(triangle1) == frozenset(triangle1.node_ids)


def test_reports_every_maximal_clique():
    g = Graph(directed=False)
    a, b, c = g.add_node(), g.add_node(), g.add_node()
    g.add_edge(a, b)
    g.add_edge(b, c)
    search = CliqueSearch(g)
    bron_kerbosch(search, set(), set(g.node_ids), set())
    assert search.reported == 2
    assert search.largest == frozenset({a, b})


def test_matches_networkx_clique_size(square1):
    largest = max(len(c) for c in nx.find_cliques(to_networkx(square1)))
    assert len(find_maximal_clique(square1)) == largest == 3
