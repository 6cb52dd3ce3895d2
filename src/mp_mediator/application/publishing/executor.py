"""Publishing – NotificationHandlerExecutor."""
from __future__ import annotations

import dataclasses
from typing import Any, Awaitable, Callable

from mp_mediator.kernel.cancellation import CancellationToken

HandlerCallback = Callable[[Any, CancellationToken], Awaitable[None]]


@dataclasses.dataclass(frozen=True)
class NotificationHandlerExecutor:
    """A handler instance paired with a callback bound to its ``handle``.

    Publishers only see this uniform shape, whatever the concrete
    ``NotificationHandler[...]`` parametrisation of ``handler_instance``.
    """

    handler_instance: Any
    handler_callback: HandlerCallback

    @classmethod
    def for_handler(cls, handler: Any) -> "NotificationHandlerExecutor":
        return cls(handler, handler.handle)

    async def __call__(self, notification: Any, token: CancellationToken) -> None:
        await self.handler_callback(notification, token)


__all__ = ["HandlerCallback", "NotificationHandlerExecutor"]
