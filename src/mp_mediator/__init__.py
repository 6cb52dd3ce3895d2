"""
mp_mediator – in-process request/notification mediator.

Import path convention::

    from mp_mediator import Mediator, Request, RequestHandler
    from mp_mediator.application.pipeline import LoggingBehavior
    from mp_mediator.application.publishing import ParallelCollectAllPublisher
    from mp_mediator.kernel.errors import HandlerNotFoundError
"""

from mp_mediator.application.mediator import (
    HandlerRegistry,
    InMemoryHandlerRegistry,
    Mediator,
    Notification,
    NotificationHandler,
    Publisher,
    Request,
    RequestHandler,
    Sender,
)
from mp_mediator.application.pipeline import PipelineBehavior
from mp_mediator.application.publishing import PublishStrategy
from mp_mediator.kernel.cancellation import CancellationToken, CancellationTokenSource

__version__ = "0.1.0"
__all__ = [
    "CancellationToken",
    "CancellationTokenSource",
    "HandlerRegistry",
    "InMemoryHandlerRegistry",
    "Mediator",
    "Notification",
    "NotificationHandler",
    "PipelineBehavior",
    "PublishStrategy",
    "Publisher",
    "Request",
    "RequestHandler",
    "Sender",
    "__version__",
]
