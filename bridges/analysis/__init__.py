"""Graph analysis API.

Usage:
    from bridges import analyze

    outcome = analyze(graph).max_flow()
"""

from __future__ import annotations

from bridges.analysis.context import AnalysisContext, analyze

__all__ = ["AnalysisContext", "analyze"]
