"""Kernel – framework-agnostic errors and cancellation primitives."""

from mp_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource
from mp_mediator.kernel.errors import (
    AggregateNotificationError,
    ApplicationError,
    BaseError,
    DuplicateHandlerError,
    HandlerInvocationError,
    HandlerNotFoundError,
    InvalidMessageError,
    MediatorError,
    RequestTimeoutError,
    ValidationError,
)

__all__ = [
    "AggregateNotificationError",
    "ApplicationError",
    "BaseError",
    "CancellationToken",
    "CancellationTokenSource",
    "DuplicateHandlerError",
    "HandlerInvocationError",
    "HandlerNotFoundError",
    "InvalidMessageError",
    "MediatorError",
    "RequestTimeoutError",
    "ValidationError",
]
