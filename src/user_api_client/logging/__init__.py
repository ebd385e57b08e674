"""Structured logging utilities with correlation and tracing support."""

from .setup import (
    LIBRARY_LOGGER,
    configure_logging,
    get_correlation_id,
    get_logger,
    get_trace_id,
    set_correlation_id,
    set_trace_id,
)

__all__ = [
    "LIBRARY_LOGGER",
    "configure_logging",
    "get_logger",
    "get_correlation_id",
    "get_trace_id",
    "set_correlation_id",
    "set_trace_id",
]
