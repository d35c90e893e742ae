"""Graph algorithms operating on :class:`bridges.model.graph.Graph`.

Each function takes the directedness of its adjacency view as an explicit
argument and returns plain values; selection handling and announcements live
in :mod:`bridges.analysis`.
"""

from bridges.algorithms.clique import find_maximal_clique
from bridges.algorithms.max_flow import calc_max_flow
from bridges.algorithms.shortest_path import find_shortest_path
from bridges.algorithms.spanning_tree import kruskal_mst, prim_mst
from bridges.algorithms.union_find import UnionFind

__all__ = [
    "UnionFind",
    "calc_max_flow",
    "find_maximal_clique",
    "find_shortest_path",
    "kruskal_mst",
    "prim_mst",
]
