# src/dagledger/core/logging.py
"""Logging setup for conversion events.

Converter and expander modules log through structlog. configure_logging()
installs a single root handler whose ProcessorFormatter renders both
structlog events and plain stdlib records, so an embedding application
sees one format (console or JSON) regardless of which API emitted them.

dagledger never configures logging on import; the embedding application
calls configure_logging() (or configures stdlib logging itself).
"""

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.stdlib import ProcessorFormatter

if TYPE_CHECKING:
    from dagledger.core.config import LoggingSettings


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Drop the _record and _from_structlog bookkeeping keys before rendering."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def _render_chain(json_output: bool) -> list[Any]:
    if json_output:
        return [_remove_internal_fields, structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [_remove_internal_fields, structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
) -> None:
    """Route structlog and stdlib logging to stdout at the given level.

    Replaces any handlers already on the root logger.

    Args:
        json_output: Render JSON lines instead of console key=value output.
        level: Stdlib level name, case-insensitive.
    """
    log_level = getattr(logging, level.upper())

    # Run for structlog events and, via foreign_pre_chain, stdlib records
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[*shared_processors, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # tests reconfigure between cases
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ProcessorFormatter(processors=_render_chain(json_output), foreign_pre_chain=shared_processors))

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for a dagledger module."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def configure_logging_from_settings(settings: "LoggingSettings") -> None:
    """Apply a validated LoggingSettings block.

    Args:
        settings: The logging section of ConverterSettings.
    """
    configure_logging(json_output=settings.format == "json", level=settings.level)
