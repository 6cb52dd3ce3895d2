"""Mediator – request dispatch and notification fan-out.

Usage::

    registry = (
        InMemoryHandlerRegistry()
        .register_request_handler(GetOrder, GetOrderHandler)
        .register_notification_handler(OrderPlaced, SendReceipt)
        .register_behavior(LoggingBehavior())
    )
    mediator = Mediator(registry, publisher=ParallelCollectAllPublisher())

    order = await mediator.send(GetOrder("o-1"))
    await mediator.publish(OrderPlaced("o-1"))
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from mp_mediator.application.mediator.contracts import (
    Notification,
    Publisher,
    Request,
    Sender,
    TResponse,
)
from mp_mediator.application.mediator.registry import HandlerRegistry
from mp_mediator.application.mediator.wrappers import (
    NotificationHandlerWrapper,
    RequestHandlerWrapper,
)
from mp_mediator.application.publishing import (
    NotificationPublisher,
    SequentialPublisher,
    publisher_for,
)
from mp_mediator.kernel.cancellation import CancellationToken
from mp_mediator.kernel.errors import InvalidMessageError
from mp_mediator.observability.logging import bind_dispatch_context, get_logger

if TYPE_CHECKING:
    from mp_mediator.config.settings import MediatorSettings

logger = get_logger(__name__)


class Mediator(Sender, Publisher):
    """In-process dispatcher over a :class:`HandlerRegistry`.

    The only state kept across calls is the per-type wrapper cache.  Wrappers
    are pure and immutable, so concurrent first builds for the same type are
    harmless: ``dict.setdefault`` keeps whichever landed first.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        publisher: NotificationPublisher | None = None,
        *,
        cache_wrappers: bool = True,
    ) -> None:
        self._registry = registry
        self._publisher = publisher or SequentialPublisher()
        self._cache_wrappers = cache_wrappers
        self._request_wrappers: dict[type, RequestHandlerWrapper] = {}
        self._notification_wrappers: dict[type, NotificationHandlerWrapper] = {}

    @classmethod
    def from_settings(cls, registry: HandlerRegistry, settings: MediatorSettings) -> "Mediator":
        return cls(
            registry,
            publisher_for(settings.strategy),
            cache_wrappers=settings.cache_wrappers,
        )

    @property
    def publisher(self) -> NotificationPublisher:
        return self._publisher

    # ------------------------------------------------------------------
    # Sender / Publisher interface
    # ------------------------------------------------------------------

    async def send(
        self, request: Request[TResponse], token: CancellationToken | None = None
    ) -> TResponse:
        """Dispatch *request* through its behavior pipeline to its handler.

        Raises :class:`HandlerNotFoundError` when no handler is registered;
        any error from a behavior or the handler propagates unchanged.
        """
        if not isinstance(request, Request):
            raise InvalidMessageError(request, Request)
        wrapper = self._request_wrapper(type(request))
        with bind_dispatch_context("send", request):
            logger.debug("mediator.send")
            return await wrapper.handle(request, self._registry, token or CancellationToken.none())

    async def publish(
        self, notification: Notification, token: CancellationToken | None = None
    ) -> None:
        """Fan *notification* out to every registered handler via the publisher."""
        if not isinstance(notification, Notification):
            raise InvalidMessageError(notification, Notification)
        wrapper = self._notification_wrapper(type(notification))
        with bind_dispatch_context("publish", notification):
            logger.debug("mediator.publish", publisher=type(self._publisher).__name__)
            await wrapper.handle(
                notification, self._registry, self._publisher, token or CancellationToken.none()
            )

    # ------------------------------------------------------------------
    # Wrapper cache
    # ------------------------------------------------------------------

    def _request_wrapper(self, request_type: type) -> RequestHandlerWrapper:
        wrapper = self._request_wrappers.get(request_type)
        if wrapper is not None:
            return wrapper
        wrapper = RequestHandlerWrapper.for_type(request_type)
        logger.debug("mediator.wrapper.built", message_type=request_type.__name__)
        if not self._cache_wrappers:
            return wrapper
        return self._request_wrappers.setdefault(request_type, wrapper)

    def _notification_wrapper(self, notification_type: type) -> NotificationHandlerWrapper:
        wrapper = self._notification_wrappers.get(notification_type)
        if wrapper is not None:
            return wrapper
        wrapper = NotificationHandlerWrapper(notification_type)
        if not self._cache_wrappers:
            return wrapper
        return self._notification_wrappers.setdefault(notification_type, wrapper)

    def cached_request_types(self) -> frozenset[type]:
        """Request classes that currently have a cached wrapper."""
        return frozenset(self._request_wrappers)


__all__ = ["Mediator"]
