"""Config settings – Settings base class and MediatorSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from mp_mediator.application.publishing import PublishStrategy
from mp_mediator.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    ``_prefix`` is prepended to every field name when reading environment
    variables (``MEDIATOR_PUBLISH_STRATEGY`` for ``publish_strategy``).
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class MediatorSettings(Settings):
    """Runtime options for :class:`~mp_mediator.application.mediator.Mediator`."""

    _prefix = "MEDIATOR"

    publish_strategy: str = PublishStrategy.SEQUENTIAL.value
    cache_wrappers: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        strategies = {s.value for s in PublishStrategy}
        self.publish_strategy = str(self.publish_strategy).lower()
        if self.publish_strategy not in strategies:
            raise InvalidSettingValueError("publish_strategy", self.publish_strategy, strategies)
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, ["CRITICAL", "DEBUG", "ERROR", "INFO", "WARNING"]
            )

    @property
    def strategy(self) -> PublishStrategy:
        return PublishStrategy(self.publish_strategy)


__all__ = ["MediatorSettings", "Settings"]
