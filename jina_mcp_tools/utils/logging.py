"""
Structured logging for jina-mcp-tools.

This module wires structlog on top of the standard logging module:
- Human-readable console output for development
- Structured JSON output when LOG_JSON is enabled
- Context variables merged into every entry (tool name per call)
- Sensitive data filtering (API keys, Authorization headers)

All output goes to stderr. In stdio mode stdout carries MCP protocol frames
and must stay clean.

Usage:
    from jina_mcp_tools.utils.logging import get_logger

    logger = get_logger(__name__)
    logger.info("tool_called", tool_name="jina_reader")
"""

import logging
import os
import sys

import structlog
from structlog.types import FilteringBoundLogger

# Sensitive data patterns to filter
SENSITIVE_KEYS = {
    "password",
    "api_key",
    "apikey",
    "secret",
    "authorization",
    "bearer",
    "access_token",
}


def filter_sensitive_data(
    logger: FilteringBoundLogger, method_name: str, event_dict: dict
) -> dict:
    """Filter out sensitive information from logs."""
    for key in list(event_dict.keys()):
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            event_dict[key] = "***REDACTED***"
    return event_dict


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structlog with appropriate processors and renderers.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON logs suitable for production
    """
    log_level = os.getenv("LOG_LEVEL", log_level).upper()
    json_logs = os.getenv("LOG_JSON", str(json_logs)).lower() in ("true", "1", "yes")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    # httpx logs every request at INFO, including full URLs
    logging.getLogger("httpx").setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        filter_sensitive_data,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
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


def get_logger(name: str = "jina_mcp_tools") -> FilteringBoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "filter_sensitive_data",
    "get_logger",
]
