"""Config validation errors."""
from __future__ import annotations

from typing import Iterable

from mp_mediator.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is invalid."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable has no value and no default."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but outside its accepted values."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, allowed: Iterable[str] = ()) -> None:
        allowed = sorted(allowed)
        reason = f"expected one of {allowed}" if allowed else "unsupported value"
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "allowed": allowed},
        )
        self.setting_name = setting_name
        self.value = value
        self.allowed = allowed


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
