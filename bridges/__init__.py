"""bridges: graph engine for an interactive graph-drawing editor.

The package models a mutable directed/undirected graph with weighted edges,
node selection and highlighting, and runs classic algorithms against the
current selection.

Primary API:
    Graph - nodes, edges, selection and adjacency queries
    Path - ordered walk or edge set returned by algorithms
    analyze() - Create an analysis context for algorithm runs
    AnalysisContext - shortest_path, prim_mst, kruskal_mst, max_flow, maximal_clique
    to_networkx() - Convert a Graph to a NetworkX graph

Example:
    from bridges import Graph, GraphMode, analyze

    graph = Graph()
    a, b, c = graph.add_node(), graph.add_node(), graph.add_node()
    graph.add_edge(a, b, weight=5)
    graph.add_edge(a, c, weight=2)
    graph.add_edge(c, b, weight=1)

    graph.mode = GraphMode.SELECT
    graph.select(a)
    graph.select(b)
    result = analyze(graph).shortest_path()
    result.path.weight  # 3
"""

from __future__ import annotations

from bridges import logging
from bridges._version import __version__
from bridges.analysis import AnalysisContext, analyze
from bridges.config import DEFAULT_CONFIG, GraphConfig
from bridges.lib.nx import to_networkx
from bridges.model.elements import Edge, Node
from bridges.model.graph import Graph
from bridges.model.path import Path
from bridges.templates import flow_network_example
from bridges.types.base import GraphMode
from bridges.types.dto import (
    DirectednessRequired,
    HighlightStep,
    MaxFlowResult,
    NotFound,
    PreconditionFailed,
    ShortestPathResult,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "Path",
    "GraphMode",
    # Configuration
    "GraphConfig",
    "DEFAULT_CONFIG",
    # Analysis (primary API)
    "analyze",
    "AnalysisContext",
    # Results
    "DirectednessRequired",
    "HighlightStep",
    "MaxFlowResult",
    "NotFound",
    "PreconditionFailed",
    "ShortestPathResult",
    # Templates
    "flow_network_example",
    # Library integrations (NetworkX)
    "to_networkx",
    # Utilities
    "logging",
]
