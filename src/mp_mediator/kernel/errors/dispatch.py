"""Dispatch errors raised by the mediator core and the handler registry."""

from __future__ import annotations

from typing import Any, Sequence

from mp_mediator.kernel.errors.base import BaseError


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


class MediatorError(BaseError):
    """Base class for failures originating in the dispatch engine itself."""

    default_code = "mediator_error"


class HandlerNotFoundError(MediatorError):
    """No handler is registered for the concrete request type."""

    default_code = "handler_not_found"

    def __init__(self, request_type: type, response_type: Any = None) -> None:
        super().__init__(
            f"No handler registered for {_type_name(request_type)!r}",
            detail={
                "request_type": _type_name(request_type),
                "response_type": _type_name(response_type),
            },
        )
        self.request_type = request_type
        self.response_type = response_type


class DuplicateHandlerError(MediatorError):
    """A second handler was registered for a request type that already has one."""

    default_code = "duplicate_handler"

    def __init__(self, request_type: type) -> None:
        super().__init__(
            f"A handler is already registered for {_type_name(request_type)!r}",
            detail={"request_type": _type_name(request_type)},
        )
        self.request_type = request_type


class InvalidMessageError(MediatorError):
    """``send``/``publish`` was given an object of the wrong kind."""

    default_code = "invalid_message"

    def __init__(self, message_obj: Any, expected: type) -> None:
        super().__init__(
            f"Expected a {expected.__name__}, got {type(message_obj).__name__!r}",
            detail={"expected": expected.__name__, "actual": type(message_obj).__name__},
        )
        self.expected = expected


class HandlerInvocationError(MediatorError):
    """Attributes one handler failure to the handler instance that raised it.

    Only produced inside :class:`AggregateNotificationError`; failures on the
    request path and in fail-fast publishers propagate unwrapped.
    """

    default_code = "handler_invocation_error"

    def __init__(self, handler: Any, error: BaseException) -> None:
        handler_name = type(handler).__name__
        super().__init__(
            f"{handler_name} failed: {error!r}",
            detail={"handler": handler_name},
            cause=error,
        )
        self.handler = handler
        self.error = error


class AggregateNotificationError(MediatorError):
    """One or more notification handlers failed under a collecting publisher.

    ``errors`` holds a :class:`HandlerInvocationError` per failed handler, in
    handler resolution order.
    """

    default_code = "aggregate_notification_error"

    def __init__(self, notification: Any, errors: Sequence[HandlerInvocationError]) -> None:
        notification_name = type(notification).__name__
        super().__init__(
            f"{len(errors)} handler(s) failed while publishing {notification_name}",
            detail={
                "notification_type": notification_name,
                "handlers": [e.detail["handler"] for e in errors],
            },
        )
        self.notification = notification
        self.errors: list[HandlerInvocationError] = list(errors)

    @property
    def exceptions(self) -> list[BaseException]:
        """The original exceptions, unwrapped."""
        return [e.error for e in self.errors]

    def _extra_payload(self) -> dict[str, Any]:
        return {"errors": [e.to_dict() for e in self.errors]}


__all__ = [
    "AggregateNotificationError",
    "DuplicateHandlerError",
    "HandlerInvocationError",
    "HandlerNotFoundError",
    "InvalidMessageError",
    "MediatorError",
]
