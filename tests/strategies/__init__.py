# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import graph_descriptions, STANDARD_SETTINGS
"""

from tests.strategies.graphs import edge_properties, graph_descriptions
from tests.strategies.settings import DETERMINISM_SETTINGS, QUICK_SETTINGS, STANDARD_SETTINGS

__all__ = [
    "DETERMINISM_SETTINGS",
    "QUICK_SETTINGS",
    "STANDARD_SETTINGS",
    "edge_properties",
    "graph_descriptions",
]
