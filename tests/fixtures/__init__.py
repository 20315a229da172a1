# tests/fixtures/__init__.py
"""Shared builders for dagledger tests.

Available builders:
- make_union_graph: three vertices with a two-member group feeding the third
- make_linear_graph: direct edges only
"""

from tests.fixtures.graphs import make_linear_graph, make_union_graph

__all__ = [
    "make_linear_graph",
    "make_union_graph",
]
