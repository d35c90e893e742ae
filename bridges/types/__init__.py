"""Shared aliases, enums and result records."""

from bridges.types.base import EdgeID, GraphMode, NodeID, Notifier, Position, Weight
from bridges.types.dto import (
    DirectednessRequired,
    HighlightStep,
    MaxFlowResult,
    NotFound,
    PreconditionFailed,
    ShortestPathResult,
)

__all__ = [
    "EdgeID",
    "GraphMode",
    "NodeID",
    "Notifier",
    "Position",
    "Weight",
    "DirectednessRequired",
    "HighlightStep",
    "MaxFlowResult",
    "NotFound",
    "PreconditionFailed",
    "ShortestPathResult",
]
