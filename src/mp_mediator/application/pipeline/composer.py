"""Application pipeline – compose_pipeline."""
from __future__ import annotations

from typing import Any, Sequence

from mp_mediator.application.pipeline.behavior import PipelineBehavior, RequestHandlerDelegate
from mp_mediator.kernel.cancellation import CancellationToken


def compose_pipeline(
    request: Any,
    behaviors: Sequence[PipelineBehavior[Any, Any]],
    terminal: RequestHandlerDelegate,
    token: CancellationToken,
) -> RequestHandlerDelegate:
    """Fold *behaviors* around *terminal* and return the entry continuation.

    The first behavior is outermost.  With no behaviors *terminal* itself is
    returned.
    """
    chain = terminal
    for behavior in reversed(behaviors):
        _next = chain
        _bh = behavior

        async def _wrap(
            *, _n: RequestHandlerDelegate = _next, _b: PipelineBehavior[Any, Any] = _bh
        ) -> Any:
            return await _b.handle(request, _n, token)

        chain = _wrap
    return chain


__all__ = ["compose_pipeline"]
