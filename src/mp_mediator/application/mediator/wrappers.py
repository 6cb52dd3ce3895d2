"""Mediator – per-type wrappers with a single non-generic ``handle`` contract.

A wrapper is built once per concrete message class and cached by the
:class:`~mp_mediator.application.mediator.mediator.Mediator`.  It holds no
handler state; instances are resolved from the registry on every call.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_mediator.application.mediator.contracts import response_type_of
from mp_mediator.application.mediator.registry import HandlerRegistry
from mp_mediator.application.pipeline.composer import compose_pipeline
from mp_mediator.application.publishing import NotificationHandlerExecutor, NotificationPublisher
from mp_mediator.kernel.cancellation import CancellationToken
from mp_mediator.kernel.errors import HandlerNotFoundError


@dataclasses.dataclass(frozen=True)
class RequestHandlerWrapper:
    request_type: type
    response_type: Any

    @classmethod
    def for_type(cls, request_type: type) -> "RequestHandlerWrapper":
        return cls(request_type, response_type_of(request_type))

    async def handle(self, request: Any, registry: HandlerRegistry, token: CancellationToken) -> Any:
        handler = registry.resolve_handler(self.request_type, self.response_type)
        if handler is None:
            raise HandlerNotFoundError(self.request_type, self.response_type)

        async def _terminal() -> Any:
            return await handler.handle(request, token)

        behaviors = registry.resolve_behaviors(self.request_type, self.response_type)
        entry = compose_pipeline(request, behaviors, _terminal, token)
        return await entry()


@dataclasses.dataclass(frozen=True)
class NotificationHandlerWrapper:
    notification_type: type

    async def handle(
        self,
        notification: Any,
        registry: HandlerRegistry,
        publisher: NotificationPublisher,
        token: CancellationToken,
    ) -> None:
        executors = [
            NotificationHandlerExecutor.for_handler(handler)
            for handler in registry.resolve_handlers(self.notification_type)
        ]
        await publisher.publish(executors, notification, token)


__all__ = ["NotificationHandlerWrapper", "RequestHandlerWrapper"]
