"""Core infrastructure: Canonical rendering, Configuration, Logging, History conversion."""

from dagledger.core.canonical import canonical_json
from dagledger.core.config import (
    HISTORY_SCHEMA_VERSION,
    ConverterSettings,
    LoggingSettings,
    load_settings,
)
from dagledger.core.history import DAGHistoryConverter, convert_graph_to_history_map
from dagledger.core.logging import configure_logging, configure_logging_from_settings, get_logger

__all__ = [
    "HISTORY_SCHEMA_VERSION",
    "ConverterSettings",
    "DAGHistoryConverter",
    "LoggingSettings",
    "canonical_json",
    "configure_logging",
    "configure_logging_from_settings",
    "convert_graph_to_history_map",
    "get_logger",
    "load_settings",
]
