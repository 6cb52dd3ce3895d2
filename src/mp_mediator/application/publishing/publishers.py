"""Publishing – NotificationPublisher strategies.

=======================  ==========================================================
Strategy                 Semantics
=======================  ==========================================================
``SEQUENTIAL``           Await each handler in order; the first failure aborts the
                         rest and is raised unchanged.
``PARALLEL_COLLECT_ALL`` Run every handler concurrently, wait for all, raise an
                         :class:`AggregateNotificationError` if any failed.
``PARALLEL_FAIL_FAST``   Run every handler concurrently, raise the first failure as
                         soon as it happens; the rest keep running in the
                         background with a cancelled token.
=======================  ==========================================================
"""
from __future__ import annotations

import abc
import asyncio
import enum
from typing import Any, Sequence

from mp_mediator.application.publishing.executor import NotificationHandlerExecutor
from mp_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource
from mp_mediator.kernel.errors import AggregateNotificationError, HandlerInvocationError
from mp_mediator.observability.logging import get_logger

logger = get_logger(__name__)


class PublishStrategy(str, enum.Enum):
    SEQUENTIAL = "sequential"
    PARALLEL_COLLECT_ALL = "parallel_collect_all"
    PARALLEL_FAIL_FAST = "parallel_fail_fast"


class NotificationPublisher(abc.ABC):
    """Port: invoke a sequence of executors for one notification."""

    @abc.abstractmethod
    async def publish(
        self,
        executors: Sequence[NotificationHandlerExecutor],
        notification: Any,
        token: CancellationToken,
    ) -> None: ...


class SequentialPublisher(NotificationPublisher):
    """Invoke executors one at a time, in resolution order (default)."""

    async def publish(
        self,
        executors: Sequence[NotificationHandlerExecutor],
        notification: Any,
        token: CancellationToken,
    ) -> None:
        for executor in executors:
            await executor(notification, token)


class ParallelCollectAllPublisher(NotificationPublisher):
    """Start every executor concurrently and aggregate all failures."""

    async def publish(
        self,
        executors: Sequence[NotificationHandlerExecutor],
        notification: Any,
        token: CancellationToken,
    ) -> None:
        if not executors:
            return
        outcomes = await asyncio.gather(
            *(executor(notification, token) for executor in executors),
            return_exceptions=True,
        )
        errors: list[HandlerInvocationError] = []
        interrupt: BaseException | None = None
        for executor, outcome in zip(executors, outcomes):
            if isinstance(outcome, Exception):
                logger.warning(
                    "notification.handler_failed",
                    handler=type(executor.handler_instance).__name__,
                    error=repr(outcome),
                )
                errors.append(HandlerInvocationError(executor.handler_instance, outcome))
            elif isinstance(outcome, BaseException) and interrupt is None:
                interrupt = outcome
        if interrupt is not None:
            # Cancellation and interpreter exits win, but the handler
            # failures travel with them.
            if errors:
                interrupt.add_note(str(AggregateNotificationError(notification, errors)))
            raise interrupt
        if errors:
            raise AggregateNotificationError(notification, errors)


class ParallelFailFastPublisher(NotificationPublisher):
    """Start every executor concurrently; surface the first failure immediately.

    Executors still in flight are not cancelled.  They receive a token linked
    to the caller's, which is cancelled on the first failure (or when the
    publishing coroutine itself is cancelled) so they may exit cooperatively.
    The linked token is detached from the caller's once every executor of the
    call has finished.
    """

    def __init__(self) -> None:
        self._background: set[asyncio.Task[None]] = set()

    async def publish(
        self,
        executors: Sequence[NotificationHandlerExecutor],
        notification: Any,
        token: CancellationToken,
    ) -> None:
        if not executors:
            return
        source = CancellationTokenSource.linked(token)
        tasks = [
            asyncio.ensure_future(executor(notification, source.token)) for executor in executors
        ]
        outstanding = len(tasks)

        def _release(_: asyncio.Future[None]) -> None:
            nonlocal outstanding
            outstanding -= 1
            if outstanding == 0:
                source.close()

        for task in tasks:
            task.add_done_callback(_release)

        pending: set[asyncio.Future[None]] = set(tasks)
        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                failed = [t for t in tasks if t in done and not t.cancelled() and t.exception() is not None]
                if failed:
                    source.cancel()
                    for task in pending:
                        self._detach(task)
                    raise failed[0].exception()  # type: ignore[misc]
        except asyncio.CancelledError:
            source.cancel()
            for task in pending:
                self._detach(task)
            raise

    def _detach(self, task: asyncio.Future[None]) -> None:
        self._background.add(task)  # type: ignore[arg-type]
        task.add_done_callback(self._on_background_done)

    def _on_background_done(self, task: asyncio.Future[None]) -> None:
        self._background.discard(task)  # type: ignore[arg-type]
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("notification.background_handler_failed", error=repr(exc))


def publisher_for(strategy: PublishStrategy | str) -> NotificationPublisher:
    """Return a fresh publisher for *strategy*."""
    strategy = PublishStrategy(strategy)
    if strategy is PublishStrategy.PARALLEL_COLLECT_ALL:
        return ParallelCollectAllPublisher()
    if strategy is PublishStrategy.PARALLEL_FAIL_FAST:
        return ParallelFailFastPublisher()
    return SequentialPublisher()


__all__ = [
    "NotificationPublisher",
    "ParallelCollectAllPublisher",
    "ParallelFailFastPublisher",
    "PublishStrategy",
    "SequentialPublisher",
    "publisher_for",
]
