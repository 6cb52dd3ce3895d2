"""Application-layer errors raised by built-in pipeline behaviors."""

from __future__ import annotations

from mp_mediator.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern at the use-case level."""

    default_code = "application_error"


class ValidationError(ApplicationError):
    """A request failed its own ``validate()`` check."""

    default_code = "validation_error"


class RequestTimeoutError(ApplicationError):
    """A request pipeline exceeded its deadline."""

    default_code = "timeout"

    def __init__(self, request_type: str, timeout_seconds: float) -> None:
        super().__init__(
            f"{request_type} timed out after {timeout_seconds}s",
            detail={"request_type": request_type, "timeout_seconds": timeout_seconds},
        )
        self.request_type = request_type
        self.timeout_seconds = timeout_seconds


__all__ = ["ApplicationError", "RequestTimeoutError", "ValidationError"]
