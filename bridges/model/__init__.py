"""Graph model: elements, graph container and paths."""

from bridges.model.elements import Edge, Node
from bridges.model.graph import Graph
from bridges.model.path import Path

__all__ = ["Edge", "Graph", "Node", "Path"]
