"""Dependency analysis for message stores.

Python 3.13+.
"""

from .graph import build_alias_graph, detect_cycles

__all__ = ["build_alias_graph", "detect_cycles"]
