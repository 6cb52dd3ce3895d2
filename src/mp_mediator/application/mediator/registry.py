"""Mediator – HandlerRegistry port and InMemoryHandlerRegistry."""
from __future__ import annotations

import abc
from typing import Any, Callable, Iterable, Sequence, Union

from mp_mediator.application.mediator.contracts import (
    Notification,
    NotificationHandler,
    Request,
    RequestHandler,
)
from mp_mediator.application.pipeline.behavior import PipelineBehavior
from mp_mediator.kernel.errors import DuplicateHandlerError


Factory = Callable[[], Any]
HandlerSource = Union[Factory, RequestHandler[Any, Any], NotificationHandler[Any], PipelineBehavior[Any, Any]]

_INSTANCE_TYPES = (RequestHandler, NotificationHandler, PipelineBehavior)


def as_factory(source: HandlerSource) -> Factory:
    """Normalise a handler class, factory callable, or instance to a factory.

    Classes and plain callables are called on every resolution; handler and
    behavior instances are returned as-is.
    """
    if isinstance(source, _INSTANCE_TYPES):
        return lambda: source
    if not callable(source):
        raise TypeError(f"Expected a handler, behavior, class or factory, got {source!r}")
    return source


class HandlerRegistry(abc.ABC):
    """Port: resolve handlers and behaviors for the mediator.

    The mediator makes no assumption about how instances are built, cached or
    scoped; it calls these methods on every dispatch.
    """

    @abc.abstractmethod
    def resolve_handler(
        self, request_type: type[Request[Any]], response_type: Any
    ) -> RequestHandler[Any, Any] | None: ...

    @abc.abstractmethod
    def resolve_handlers(
        self, notification_type: type[Notification]
    ) -> Sequence[NotificationHandler[Any]]: ...

    @abc.abstractmethod
    def resolve_behaviors(
        self, request_type: type[Request[Any]], response_type: Any
    ) -> Sequence[PipelineBehavior[Any, Any]]: ...


class InMemoryHandlerRegistry(HandlerRegistry):
    """Dictionary-backed registry.

    * one handler per concrete request type; a second registration raises
      :class:`DuplicateHandlerError` unless ``replace=True``
    * notification handlers apply to the registered type and its subclasses,
      in registration order
    * behaviors apply to every request, or only to the given request types
      (and their subclasses), in registration order
    """

    def __init__(self) -> None:
        self._request_handlers: dict[type, Factory] = {}
        self._notification_handlers: list[tuple[type, Factory]] = []
        self._behaviors: list[tuple[tuple[type, ...] | None, Factory]] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_request_handler(
        self,
        request_type: type[Request[Any]],
        handler: HandlerSource,
        *,
        replace: bool = False,
    ) -> "InMemoryHandlerRegistry":
        if request_type in self._request_handlers and not replace:
            raise DuplicateHandlerError(request_type)
        self._request_handlers[request_type] = as_factory(handler)
        return self

    def register_notification_handler(
        self,
        notification_type: type[Notification],
        handler: HandlerSource,
    ) -> "InMemoryHandlerRegistry":
        self._notification_handlers.append((notification_type, as_factory(handler)))
        return self

    def register_behavior(
        self,
        behavior: HandlerSource,
        request_types: Iterable[type[Request[Any]]] | None = None,
    ) -> "InMemoryHandlerRegistry":
        scope = tuple(request_types) if request_types is not None else None
        self._behaviors.append((scope, as_factory(behavior)))
        return self

    # ------------------------------------------------------------------
    # HandlerRegistry interface
    # ------------------------------------------------------------------

    def resolve_handler(
        self, request_type: type[Request[Any]], response_type: Any
    ) -> RequestHandler[Any, Any] | None:
        factory = self._request_handlers.get(request_type)
        return factory() if factory is not None else None

    def resolve_handlers(
        self, notification_type: type[Notification]
    ) -> list[NotificationHandler[Any]]:
        return [
            factory()
            for registered, factory in self._notification_handlers
            if issubclass(notification_type, registered)
        ]

    def resolve_behaviors(
        self, request_type: type[Request[Any]], response_type: Any
    ) -> list[PipelineBehavior[Any, Any]]:
        return [
            factory()
            for scope, factory in self._behaviors
            if scope is None or issubclass(request_type, scope)
        ]


__all__ = ["Factory", "HandlerRegistry", "HandlerSource", "InMemoryHandlerRegistry", "as_factory"]
