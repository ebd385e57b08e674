# Context variables for correlation and trace IDs
import contextvars
import logging
import sys
from typing import TextIO

import structlog
from pythonjsonlogger.json import JsonFormatter

LIBRARY_LOGGER = "user_api_client"

_correlation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)
_trace_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("trace_id", default=None)

# Silent until the host application or configure_logging adds a handler
logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())

# Handler installed by configure_logging, replaced on reconfiguration
_handler: logging.Handler | None = None


def set_correlation_id(correlation_id: str | None) -> None:
    """Set correlation ID in context"""
    _correlation_id_var.set(correlation_id)


def set_trace_id(trace_id: str | None) -> None:
    """Set trace ID in context"""
    _trace_id_var.set(trace_id)


def get_correlation_id() -> str | None:
    """Get correlation ID from context"""
    return _correlation_id_var.get()


def get_trace_id() -> str | None:
    """Get trace ID from context"""
    return _trace_id_var.get()


def add_correlation_context(logger, method_name, event_dict):
    """Add correlation and trace IDs from context"""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id

    trace_id = get_trace_id()
    if trace_id:
        event_dict["trace_id"] = trace_id

    return event_dict


def add_service_context(service_name: str):
    """Add service context to all log entries"""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger backed by the stdlib logger of the same name

    Events are handed to stdlib logging with their fields as record extras,
    so nothing is emitted until a handler is configured by the host
    application or by configure_logging.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_correlation_context,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    service_name: str,
    level: str = "INFO",
    format_type: str = "json",  # "json" or "console"
    stream: TextIO | None = None,
) -> logging.Handler:
    """
    Attach a handler to the library logger only

    Args:
        service_name: Name of the service for log context
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: "json" for production, "console" for development
        stream: Output stream, stdout when omitted

    Returns:
        The installed handler
    """
    global _handler

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if _handler is not None:
        library_logger.removeHandler(_handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if format_type == "console":
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=[structlog.stdlib.ExtraAdder(), add_service_context(service_name)],
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.dev.ConsoleRenderer(colors=False),
                ],
            )
        )
    else:
        handler.setFormatter(
            JsonFormatter(
                fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
                static_fields={"service": service_name},
            )
        )

    library_logger.addHandler(handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _handler = handler
    return handler
