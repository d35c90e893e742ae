"""Base aliases and enums shared across the engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Tuple

#: Arena handle of a node; unique within a Graph and never reused.
NodeID = int

#: Arena handle of an edge; unique within a Graph and never reused.
EdgeID = int

#: Edge weights are integers; the UI increments and decrements them.
Weight = int

#: Placement point of a node as supplied by the caller.
Position = Tuple[float, float]

#: Callback receiving a (title, message) announcement.
Notifier = Callable[[str, str], None]


class GraphMode(IntEnum):
    """Operational state of a graph, driven by the surrounding application.

    Selection-based algorithms only accept input while the graph is in
    ``SELECT`` mode. Algorithms switch the graph to ``VIEW_ONLY`` while they
    run.
    """

    SELECT = 1
    VIEW_ONLY = 2
    NODES = 3
    EDGES = 4
