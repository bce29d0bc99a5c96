"""
engine/
-------
Caller-facing state on top of the pure algorithms.

    from engine import TopologicalSession, Replay, summarize, compare
"""

from engine.topo_session import TopologicalSession
from engine.replay       import Replay
from engine.recorder     import RunMetrics, ComparisonResult, summarize, compare

__all__ = [
    "TopologicalSession",
    "Replay",
    "RunMetrics",
    "ComparisonResult",
    "summarize",
    "compare",
]
