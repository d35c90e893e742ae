import bridges


def test_public_api_exports():
    for name in bridges.__all__:
        assert hasattr(bridges, name), name


def test_readme_quick_start():
    graph = bridges.Graph()
    a, b, c = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(a, b, weight=5)
    graph.add_edge(a, c, weight=2)
    graph.add_edge(c, b, weight=1)

    graph.mode = bridges.GraphMode.SELECT
    graph.select(a)
    graph.select(b)
    result = bridges.analyze(graph).shortest_path()

    assert result.path.node_labels() == ["1", "3", "2"]
    assert result.path.weight == 3
    for step in result.highlight_steps():
        graph.apply_highlight(step)
    assert all(graph.get_node(n).highlighted for n in (a, b, c))
