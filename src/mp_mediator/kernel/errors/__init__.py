"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── MediatorError                (dispatch.py)
    │   ├── HandlerNotFoundError
    │   ├── DuplicateHandlerError
    │   ├── InvalidMessageError
    │   ├── HandlerInvocationError
    │   └── AggregateNotificationError
    └── ApplicationError             (application.py)
        ├── ValidationError
        └── RequestTimeoutError
"""

from mp_mediator.kernel.errors.application import (
    ApplicationError,
    RequestTimeoutError,
    ValidationError,
)
from mp_mediator.kernel.errors.base import BaseError
from mp_mediator.kernel.errors.dispatch import (
    AggregateNotificationError,
    DuplicateHandlerError,
    HandlerInvocationError,
    HandlerNotFoundError,
    InvalidMessageError,
    MediatorError,
)

__all__ = [
    "AggregateNotificationError",
    "ApplicationError",
    "BaseError",
    "DuplicateHandlerError",
    "HandlerInvocationError",
    "HandlerNotFoundError",
    "InvalidMessageError",
    "MediatorError",
    "RequestTimeoutError",
    "ValidationError",
]
