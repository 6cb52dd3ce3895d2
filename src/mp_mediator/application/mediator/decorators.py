"""Mediator – @request_handler, @notification_handler and @pipeline_behavior decorators."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from mp_mediator.application.mediator.contracts import Notification, Request
from mp_mediator.application.mediator.registry import InMemoryHandlerRegistry
from mp_mediator.kernel.errors import DuplicateHandlerError

C = TypeVar("C", bound=type)

# ---------------------------------------------------------------------------
# Global registrations populated at import time by the decorators
# ---------------------------------------------------------------------------

_REQUEST_HANDLERS: dict[type, type] = {}
_NOTIFICATION_HANDLERS: list[tuple[type, type]] = []
_BEHAVIORS: list[tuple[tuple[type, ...] | None, type]] = []


# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------


def request_handler(request_type: type[Request[Any]]) -> Callable[[C], C]:
    """Class decorator that registers a :class:`RequestHandler` for *request_type*.

    Usage::

        @request_handler(GetOrder)
        class GetOrderHandler(RequestHandler[GetOrder, Order]):
            async def handle(self, request: GetOrder, token: CancellationToken) -> Order:
                ...

    The class is instantiated (no-arg constructor) on every dispatch by the
    registry built with :func:`make_registry`.
    """
    def decorator(handler_class: C) -> C:
        if request_type in _REQUEST_HANDLERS:
            raise DuplicateHandlerError(request_type)
        _REQUEST_HANDLERS[request_type] = handler_class
        return handler_class

    return decorator


def notification_handler(notification_type: type[Notification]) -> Callable[[C], C]:
    """Class decorator that adds a :class:`NotificationHandler` for *notification_type*."""
    def decorator(handler_class: C) -> C:
        _NOTIFICATION_HANDLERS.append((notification_type, handler_class))
        return handler_class

    return decorator


def pipeline_behavior(*request_types: type[Request[Any]]) -> Callable[[C], C]:
    """Class decorator that adds a :class:`PipelineBehavior`.

    Without arguments the behavior applies to every request; otherwise only to
    *request_types* and their subclasses.  Order follows decoration order.
    """
    def decorator(behavior_class: C) -> C:
        _BEHAVIORS.append((request_types or None, behavior_class))
        return behavior_class

    return decorator


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------


def make_registry(
    extra: dict[type[Request[Any]], Any] | None = None,
) -> InMemoryHandlerRegistry:
    """Build an :class:`InMemoryHandlerRegistry` from the decorated classes.

    *extra* maps request types to handler instances or factories that
    replace (or add to) the decorated handlers – useful in tests.
    """
    registry = InMemoryHandlerRegistry()
    for request_type, handler_class in _REQUEST_HANDLERS.items():
        registry.register_request_handler(request_type, handler_class)
    for notification_type, handler_class in _NOTIFICATION_HANDLERS:
        registry.register_notification_handler(notification_type, handler_class)
    for scope, behavior_class in _BEHAVIORS:
        registry.register_behavior(behavior_class, scope)
    if extra:
        for request_type, handler in extra.items():
            registry.register_request_handler(request_type, handler, replace=True)
    return registry


def clear_registries() -> None:
    """Drop every decorated registration.  Use in tests to avoid leakage.

    .. warning::
        This mutates module-level state.  Only call in tests.
    """
    _REQUEST_HANDLERS.clear()
    _NOTIFICATION_HANDLERS.clear()
    _BEHAVIORS.clear()


__all__ = [
    "clear_registries",
    "make_registry",
    "notification_handler",
    "pipeline_behavior",
    "request_handler",
]
