"""Config settings – dataclass settings and loaders."""
from mp_mediator.config.settings.base import MediatorSettings, Settings
from mp_mediator.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "MediatorSettings", "Settings", "SettingsLoader"]
