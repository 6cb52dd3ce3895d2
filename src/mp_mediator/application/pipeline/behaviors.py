"""Application pipeline – built-in behavior implementations."""
from __future__ import annotations

import asyncio
import time
from typing import Any

import tenacity

from mp_mediator.application.pipeline.behavior import PipelineBehavior, RequestHandlerDelegate
from mp_mediator.kernel.cancellation import CancellationToken
from mp_mediator.kernel.errors import RequestTimeoutError
from mp_mediator.observability.logging import get_logger

logger = get_logger(__name__)


class LoggingBehavior(PipelineBehavior[Any, Any]):
    """Log request completion/failure with timing."""

    async def handle(self, request: Any, next_: RequestHandlerDelegate, token: CancellationToken) -> Any:
        name = type(request).__name__
        start = time.perf_counter()
        try:
            result = await next_()
        except Exception:
            duration = (time.perf_counter() - start) * 1000
            logger.error("request.failed", request=name, duration_ms=round(duration, 2))
            raise
        duration = (time.perf_counter() - start) * 1000
        logger.info("request.completed", request=name, duration_ms=round(duration, 2))
        return result


class ValidationBehavior(PipelineBehavior[Any, Any]):
    """Call ``request.validate()`` if it exists; a raise short-circuits the chain."""

    async def handle(self, request: Any, next_: RequestHandlerDelegate, token: CancellationToken) -> Any:
        validate = getattr(request, "validate", None)
        if callable(validate):
            validate()
        return await next_()


class TimeoutBehavior(PipelineBehavior[Any, Any]):
    """Raise :class:`RequestTimeoutError` if the inner chain exceeds *timeout_seconds*."""

    def __init__(self, timeout_seconds: float) -> None:
        self._timeout = timeout_seconds

    async def handle(self, request: Any, next_: RequestHandlerDelegate, token: CancellationToken) -> Any:
        try:
            return await asyncio.wait_for(next_(), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise RequestTimeoutError(type(request).__name__, self._timeout) from exc


class RetryBehavior(PipelineBehavior[Any, Any]):
    """Re-invoke the rest of the chain on failure, backed by ``tenacity``.

    Parameters
    ----------
    max_attempts:
        Maximum number of attempts (including the first).
    wait:
        A ``tenacity`` wait strategy.  Defaults to no wait.
    retry:
        A ``tenacity`` retry predicate.  Defaults to retrying any exception.

    Retries stop early once *token* is cancelled; the last error is re-raised.
    """

    def __init__(self, max_attempts: int = 3, wait: Any = None, retry: Any = None) -> None:
        self._max_attempts = max_attempts
        self._wait = wait or tenacity.wait_none()
        self._retry = retry or tenacity.retry_if_exception_type(Exception)

    async def handle(self, request: Any, next_: RequestHandlerDelegate, token: CancellationToken) -> Any:
        retrying = tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(self._max_attempts)
            | tenacity.stop_when_event_set(_TokenEvent(token)),
            wait=self._wait,
            retry=self._retry,
            reraise=True,
            before_sleep=self._log_retry,
        )
        async for attempt in retrying:
            with attempt:
                result = await next_()
        return result

    @staticmethod
    def _log_retry(state: tenacity.RetryCallState) -> None:
        outcome = state.outcome
        logger.debug(
            "request.retry",
            attempt=state.attempt_number,
            error=repr(outcome.exception()) if outcome is not None else None,
        )


class _TokenEvent:
    """Adapts a token to the ``is_set()`` shape ``stop_when_event_set`` expects."""

    def __init__(self, token: CancellationToken) -> None:
        self._token = token

    def is_set(self) -> bool:
        return self._token.is_cancelled


__all__ = [
    "LoggingBehavior",
    "RetryBehavior",
    "TimeoutBehavior",
    "ValidationBehavior",
]
