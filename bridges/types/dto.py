"""Result and outcome containers returned by the analysis entry points.

Algorithms never raise for user-facing failures. They return one of these
immutable records so the caller can branch on the outcome type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from bridges.types.base import EdgeID, NodeID

if TYPE_CHECKING:
    from bridges.model.path import Path

#: Color of paths explored but not chosen by the shortest-path search.
TRAVERSAL_COLOR = "#AAAAAA"


@dataclass(frozen=True)
class PreconditionFailed:
    """The algorithm did not run because its input was not in place.

    Attributes:
        title: Short name of the algorithm, suitable for an alert title.
        message: Human-readable explanation of the missing precondition.
    """

    title: str
    message: str


@dataclass(frozen=True)
class DirectednessRequired:
    """The algorithm needs the whole graph converted before it can run.

    The caller confirms by calling ``Graph.set_directed(directed)`` and
    invoking the algorithm again.

    Attributes:
        title: Short name of the algorithm.
        directed: The directedness the graph must be switched to.
        message: Human-readable explanation for a confirmation prompt.
    """

    title: str
    directed: bool
    message: str


@dataclass(frozen=True)
class NotFound:
    """No path connects origin to target."""

    origin: NodeID
    target: NodeID


@dataclass(frozen=True)
class ShortestPathResult:
    """Minimum-weight path plus the other paths discovered on the way.

    Attributes:
        path: The winning path.
        traversals: Other complete paths in discovery order, without duplicates.
    """

    path: Path
    traversals: Tuple[Path, ...] = ()

    def highlight_steps(self) -> List[HighlightStep]:
        """Replay schedule for the search.

        Each alternative shows for two seconds, three seconds apart, and the
        winning path follows the last one.
        """
        steps: List[HighlightStep] = []
        for index, path in enumerate(self.traversals):
            steps.extend(
                path.highlight_steps(wait=index * 3, duration=2, color=TRAVERSAL_COLOR)
            )
        steps.extend(self.path.highlight_steps(wait=len(self.traversals) * 3))
        return sorted(steps, key=lambda step: step.delay)


@dataclass(frozen=True)
class MaxFlowResult:
    """Outcome of a Ford-Fulkerson run.

    Attributes:
        flow_value: Sum of the bottlenecks of all augmenting paths.
        sink_inbound_flow: Total flow on edges ending at the sink.
        augmenting_paths: Augmenting paths in the order they were applied.
    """

    flow_value: int
    sink_inbound_flow: int
    augmenting_paths: Tuple[Path, ...] = ()

    def highlight_steps(self) -> List[HighlightStep]:
        """Replay schedule: each augmenting path for two seconds, four seconds apart."""
        steps: List[HighlightStep] = []
        for index, path in enumerate(self.augmenting_paths):
            steps.extend(path.highlight_steps(wait=index * 4, duration=2))
        return sorted(steps, key=lambda step: step.delay)


@dataclass(frozen=True)
class HighlightStep:
    """One entry of a highlight schedule.

    Attributes:
        delay: Seconds after the schedule starts at which the step applies.
        edge: Edge to (un)highlight.
        nodes: Endpoints of the edge, highlighted together with it.
        highlighted: True to highlight, False to restore.
        color: Highlight color, or None for the default.
    """

    delay: int
    edge: EdgeID
    nodes: Tuple[NodeID, NodeID]
    highlighted: bool = True
    color: Optional[str] = None
