"""Configuration for graph construction and algorithm policies."""

from dataclasses import dataclass, field
from typing import Tuple

#: Node colors cycled through on creation: green, pink, blue, yellow, purple.
DEFAULT_PALETTE: Tuple[str, ...] = (
    "#64D2B9",
    "#EB78B4",
    "#5AA0EB",
    "#F5C85A",
    "#C39BF5",
)


@dataclass
class GraphConfig:
    """Tunable policies shared by a Graph and the algorithms run on it."""

    # Colors assigned to new nodes, advancing one entry per created node
    palette: Tuple[str, ...] = field(default=DEFAULT_PALETTE)

    # Weight given to newly created edges and used by bulk weight resets
    default_weight: int = 1

    # Directed graphs may hold both a->b and b->a; undirected graphs never do
    allow_antiparallel_edges: bool = True

    # Bron-Kerbosch neighbor lookup follows the live directed flag when True
    clique_respects_direction: bool = False

    # Assert inbound == outbound flow on inner nodes after max flow
    check_flow_conservation: bool = True

    def color_for(self, cycle: int) -> str:
        """Return the palette color for a cycle position."""
        return self.palette[cycle % len(self.palette)]

    def next_cycle(self, cycle: int) -> int:
        """Advance a color cycle position, wrapping at the end of the palette."""
        return (cycle + 1) % len(self.palette)


# Global configuration instance
DEFAULT_CONFIG = GraphConfig()
