"""Observability – get_logger helper and dispatch context binding."""
from __future__ import annotations

from typing import Any, ContextManager

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def bind_dispatch_context(kind: str, message: Any) -> ContextManager[Any]:
    """Bind ``dispatch`` and ``message_type`` to structlog contextvars.

    Every event logged by behaviors and handlers while the context is active
    carries both keys (via ``merge_contextvars``).
    """
    return structlog.contextvars.bound_contextvars(
        dispatch=kind,
        message_type=type(message).__name__,
    )


__all__ = ["bind_dispatch_context", "get_logger"]
