"""Application pipeline – request behavior chain."""
from mp_mediator.application.pipeline.behavior import PipelineBehavior, RequestHandlerDelegate
from mp_mediator.application.pipeline.composer import compose_pipeline
from mp_mediator.application.pipeline.behaviors import (
    LoggingBehavior,
    RetryBehavior,
    TimeoutBehavior,
    ValidationBehavior,
)

__all__ = [
    "LoggingBehavior",
    "PipelineBehavior",
    "RequestHandlerDelegate",
    "RetryBehavior",
    "TimeoutBehavior",
    "ValidationBehavior",
    "compose_pipeline",
]
