"""Application – mediator, request pipeline and notification publishing."""

from mp_mediator.application.mediator import (
    HandlerRegistry,
    InMemoryHandlerRegistry,
    Mediator,
    Notification,
    NotificationHandler,
    Request,
    RequestHandler,
)
from mp_mediator.application.pipeline import PipelineBehavior, compose_pipeline
from mp_mediator.application.publishing import (
    NotificationHandlerExecutor,
    NotificationPublisher,
    PublishStrategy,
)

__all__ = [
    "HandlerRegistry",
    "InMemoryHandlerRegistry",
    "Mediator",
    "Notification",
    "NotificationHandler",
    "NotificationHandlerExecutor",
    "NotificationPublisher",
    "PipelineBehavior",
    "PublishStrategy",
    "Request",
    "RequestHandler",
    "compose_pipeline",
]
