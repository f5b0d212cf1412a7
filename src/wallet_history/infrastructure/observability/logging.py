"""
Structured logging infrastructure for wallet-history.
Provides consistent, machine-readable logs across all layers.

Log Structure:
    {
        "app": "wallet-history",       # Application identifier
        "layer": "history",            # Architectural layer
        "component": "reconstructor",  # Specific component
        "module": "...",               # Python module (optional)
        "event": "series_reconstructed",  # What happened
        ...
    }

Architectural Layers:
    - infrastructure: Cross-cutting (config, clock)
    - ingestion: Normalization of transaction-history feed records
    - history: Time grids, balance reconstruction, report summaries
    - charting: Rendering and hover lookup
    - orchestration: Workflows composing the layers for a view
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

APP_NAME = "wallet-history"

Layer = Literal["infrastructure", "ingestion", "history", "charting", "orchestration"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the application identifier to every log entry."""
    event_dict["app"] = APP_NAME
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """
    Add severity level for cloud logging compatibility.
    Maps Python log levels to standard severity levels.
    """
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, use human-readable format (dev mode).
        include_timestamp: Whether to include ISO timestamps in logs

    Usage:
        >>> from wallet_history.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance with architectural context.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer (history, charting, ...)
        component: Specific component within the layer
        **initial_context: Additional context key-value pairs to bind to logger

    Returns:
        Configured structlog logger with bound context

    Usage:
        >>> log = get_logger(__name__, layer="history", component="reconstructor")
        >>> log.info("series_reconstructed", buckets=24)
    """
    logger = structlog.get_logger(name)

    context: dict[str, Any] = {}

    if layer:
        context["layer"] = layer

    if component:
        context["component"] = component

    if name:
        context["module"] = name

    context.update(initial_context)

    if context:
        logger = logger.bind(**context)

    return logger


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_infrastructure_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the infrastructure layer (config loading, clock).

    Usage:
        >>> log = get_infrastructure_logger("config-loader")
        >>> log.info("config_loaded", env="dev")
    """
    return get_logger(
        "infrastructure",
        layer="infrastructure",
        component=component,
        **context,
    )


def get_ingestion_logger(
    component: str = "normalizer",
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the ingestion layer (feed record normalization).

    Usage:
        >>> log = get_ingestion_logger(source="transaction-history")
        >>> log.warning("record_skipped", record_id="tx-1")
    """
    return get_logger(
        "ingestion",
        layer="ingestion",
        component=component,
        **context,
    )


def get_history_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the history layer (grids, reconstruction, summaries).

    Usage:
        >>> log = get_history_logger("reconstructor")
        >>> log.debug("series_reconstructed", buckets=30)
    """
    return get_logger(
        "history",
        layer="history",
        component=component,
        **context,
    )


def get_charting_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the charting layer (renderer, hover, surfaces).

    Usage:
        >>> log = get_charting_logger("renderer")
        >>> log.debug("chart_rendered", points=24)
    """
    return get_logger(
        "charting",
        layer="charting",
        component=component,
        **context,
    )


def get_orchestration_logger(
    component: str = "workflow",
    view: str | None = None,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for the orchestration layer (per-view chart workflows).

    Args:
        component: Component name (default: "workflow")
        view: Chart view the workflow serves (optional)
        **context: Additional context

    Usage:
        >>> log = get_orchestration_logger(view="dashboard")
        >>> log.info("chart_refreshed", transactions=12)
    """
    ctx: dict[str, Any] = {}
    if view:
        ctx["view"] = view
    ctx.update(context)

    return get_logger(
        "orchestration",
        layer="orchestration",
        component=component,
        **ctx,
    )
