"""Application mediator – requests, notifications, registry and dispatcher."""
from mp_mediator.application.mediator.contracts import (
    Notification,
    NotificationHandler,
    Publisher,
    Request,
    RequestHandler,
    Sender,
    response_type_of,
)
from mp_mediator.application.mediator.registry import (
    HandlerRegistry,
    InMemoryHandlerRegistry,
)
from mp_mediator.application.mediator.wrappers import (
    NotificationHandlerWrapper,
    RequestHandlerWrapper,
)
from mp_mediator.application.mediator.mediator import Mediator
from mp_mediator.application.mediator.decorators import (
    clear_registries,
    make_registry,
    notification_handler,
    pipeline_behavior,
    request_handler,
)

__all__ = [
    "HandlerRegistry",
    "InMemoryHandlerRegistry",
    "Mediator",
    "Notification",
    "NotificationHandler",
    "NotificationHandlerWrapper",
    "Publisher",
    "Request",
    "RequestHandler",
    "RequestHandlerWrapper",
    "Sender",
    "clear_registries",
    "make_registry",
    "notification_handler",
    "pipeline_behavior",
    "request_handler",
    "response_type_of",
]
