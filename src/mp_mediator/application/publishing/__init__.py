"""Application publishing – notification executors and publish strategies."""
from mp_mediator.application.publishing.executor import HandlerCallback, NotificationHandlerExecutor
from mp_mediator.application.publishing.publishers import (
    NotificationPublisher,
    ParallelCollectAllPublisher,
    ParallelFailFastPublisher,
    PublishStrategy,
    SequentialPublisher,
    publisher_for,
)

__all__ = [
    "HandlerCallback",
    "NotificationHandlerExecutor",
    "NotificationPublisher",
    "ParallelCollectAllPublisher",
    "ParallelFailFastPublisher",
    "PublishStrategy",
    "SequentialPublisher",
    "publisher_for",
]
