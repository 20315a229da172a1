"""Semantic type aliases for compile-time type safety.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of semantically different string values.
"""

from typing import NewType

VertexName = NewType("VertexName", str)
"""Unique vertex name within one graph (e.g., 'tokenizer')"""

GroupName = NewType("GroupName", str)
"""Unique vertex group name within one graph (e.g., 'union_12')"""

EdgeID = NewType("EdgeID", str)
"""Run-local identifier of one concrete edge (e.g., '3')"""
