"""Observability – structured logging helpers."""
from mp_mediator.observability.logging.factory import JsonLoggerFactory
from mp_mediator.observability.logging.processors import bind_dispatch_context, get_logger

__all__ = ["JsonLoggerFactory", "bind_dispatch_context", "get_logger"]
