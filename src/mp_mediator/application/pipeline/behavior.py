"""Application pipeline – PipelineBehavior base."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable, Generic, TypeVar

from mp_mediator.kernel.cancellation import CancellationToken

TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")

RequestHandlerDelegate = Callable[[], Awaitable[Any]]
"""Zero-argument continuation to the rest of the chain."""


class PipelineBehavior(abc.ABC, Generic[TRequest, TResponse]):
    """Single node in a request pipeline.

    A behavior receives the remaining chain as ``next_``.  It may await it
    zero times (short-circuit), once (pass-through), or several times
    (retry).
    """

    @abc.abstractmethod
    async def handle(
        self,
        request: TRequest,
        next_: RequestHandlerDelegate,
        token: CancellationToken,
    ) -> TResponse: ...


__all__ = ["PipelineBehavior", "RequestHandlerDelegate"]
