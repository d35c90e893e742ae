from bridges.algorithms.union_find import UnionFind


def test_singletons():
    uf = UnionFind([1, 2, 3])
    assert len(uf) == 3
    assert uf.find(2) == 2
    assert not uf.connected(1, 2)


def test_union_merges_and_rejects_repeats():
    uf = UnionFind(range(5))
    assert uf.union(0, 1) is True
    assert uf.union(1, 2) is True
    assert uf.union(2, 0) is False
    assert uf.connected(0, 2)
    assert len(uf) == 3


def test_path_compression():
    uf = UnionFind(range(4))
    uf.parent = {0: 0, 1: 0, 2: 1, 3: 2}
    assert uf.find(3) == 0
    assert uf.parent[3] == 0
    assert uf.parent[2] == 0


def test_union_by_rank_keeps_deeper_root():
    uf = UnionFind(range(4))
    uf.union(0, 1)
    root = uf.find(0)
    uf.union(2, root)
    assert uf.find(2) == root
    assert uf.rank[root] == 1
