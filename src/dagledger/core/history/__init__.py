# src/dagledger/core/history/__init__.py
"""History record conversion for job graph descriptions.

Package re-exports for the public conversion API.
"""

from dagledger.core.history.converter import DAGHistoryConverter, convert_graph_to_history_map
from dagledger.core.history.descriptors import DescriptorExtractor
from dagledger.core.history.expander import (
    ConcreteEdge,
    ExpandedGraph,
    expand_graph,
    expand_group_edge,
    expand_group_outputs,
)
from dagledger.core.history.identity import EdgeIdAssigner
from dagledger.core.history.validation import validate_graph
from dagledger.core.history.vertices import convert_vertex

__all__ = [
    "ConcreteEdge",
    "DAGHistoryConverter",
    "DescriptorExtractor",
    "EdgeIdAssigner",
    "ExpandedGraph",
    "convert_graph_to_history_map",
    "convert_vertex",
    "expand_graph",
    "expand_group_edge",
    "expand_group_outputs",
    "validate_graph",
]
