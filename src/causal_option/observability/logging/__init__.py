"""Observability – structured logging helpers."""
from causal_option.observability.logging.factory import JsonLoggerFactory
from causal_option.observability.logging.processors import callable_name, get_logger, render_cause

__all__ = [
    "JsonLoggerFactory",
    "callable_name",
    "get_logger",
    "render_cause",
]
