"""Mediator – Request, Notification, their handlers, and the Sender/Publisher ports."""
from __future__ import annotations

import abc
import typing
from typing import Any, Generic, TypeVar

from mp_mediator.kernel.cancellation import CancellationToken

TResponse = TypeVar("TResponse")
TRequest = TypeVar("TRequest", bound="Request[Any]")
TNotification = TypeVar("TNotification", bound="Notification")


class Request(Generic[TResponse]):
    """Marker base for requests answered by exactly one handler.

    The response type is fixed by the generic parameter::

        @dataclass(frozen=True)
        class GetOrder(Request[Order]):
            order_id: str
    """


class Notification:
    """Marker base for notifications broadcast to zero or more handlers."""


class RequestHandler(abc.ABC, Generic[TRequest, TResponse]):
    """Handle a single request type and return its response."""

    @abc.abstractmethod
    async def handle(self, request: TRequest, token: CancellationToken) -> TResponse: ...


class NotificationHandler(abc.ABC, Generic[TNotification]):
    """React to a single notification type."""

    @abc.abstractmethod
    async def handle(self, notification: TNotification, token: CancellationToken) -> None: ...


class Sender(abc.ABC):
    """Port: send a request to its single handler."""

    @abc.abstractmethod
    async def send(
        self, request: Request[TResponse], token: CancellationToken | None = None
    ) -> TResponse: ...


class Publisher(abc.ABC):
    """Port: publish a notification to every interested handler."""

    @abc.abstractmethod
    async def publish(
        self, notification: Notification, token: CancellationToken | None = None
    ) -> None: ...


def response_type_of(request_type: type) -> Any:
    """Return the ``TResponse`` a request class declared, or ``Any``.

    Walks the MRO so that subclasses of a parametrised request inherit its
    response type.
    """
    for klass in request_type.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            if typing.get_origin(base) is Request:
                args = typing.get_args(base)
                if args and not isinstance(args[0], TypeVar):
                    return args[0]
    return Any


__all__ = [
    "Notification",
    "NotificationHandler",
    "Publisher",
    "Request",
    "RequestHandler",
    "Sender",
    "TNotification",
    "TRequest",
    "TResponse",
    "response_type_of",
]
