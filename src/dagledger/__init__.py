"""
dagledger: History records for job DAG descriptions.

Converts a static graph description (vertices, edges, vertex groups and
group edges) into the flat, key-addressed record a history service
ingests, expanding every vertex group into its concrete members.
"""

from dagledger.core.history import DAGHistoryConverter, convert_graph_to_history_map

__version__ = "0.1.0"

__all__ = ["DAGHistoryConverter", "__version__", "convert_graph_to_history_map"]
