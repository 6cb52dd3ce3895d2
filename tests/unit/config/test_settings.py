"""Unit tests for MediatorSettings and EnvSettingsLoader."""

from __future__ import annotations

import dataclasses

import pytest

from mp_mediator.application.publishing import PublishStrategy
from mp_mediator.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MediatorSettings,
    MissingRequiredSettingError,
    Settings,
)


@dataclasses.dataclass
class _RequiredSettings(Settings):
    _prefix = "APP"

    name: str
    workers: int = 1
    ratio: float = 0.5


class TestMediatorSettings:
    def test_defaults(self) -> None:
        settings = MediatorSettings()
        assert settings.strategy is PublishStrategy.SEQUENTIAL
        assert settings.cache_wrappers is True
        assert settings.log_level == "INFO"

    def test_strategy_is_normalised(self) -> None:
        settings = MediatorSettings(publish_strategy="PARALLEL_COLLECT_ALL")
        assert settings.strategy is PublishStrategy.PARALLEL_COLLECT_ALL

    def test_unknown_strategy_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            MediatorSettings(publish_strategy="round_robin")
        assert exc_info.value.setting_name == "publish_strategy"
        assert "sequential" in exc_info.value.allowed

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            MediatorSettings(log_level="chatty")

    def test_prefix_is_a_class_attribute_not_a_field(self) -> None:
        assert "_prefix" not in {f.name for f in dataclasses.fields(MediatorSettings)}
        assert "_prefix" not in {f.name for f in dataclasses.fields(_RequiredSettings)}
        assert MediatorSettings._prefix == "MEDIATOR"


class TestEnvSettingsLoader:
    def test_reads_prefixed_variables(self) -> None:
        env = {
            "MEDIATOR_PUBLISH_STRATEGY": "parallel_fail_fast",
            "MEDIATOR_CACHE_WRAPPERS": "false",
            "MEDIATOR_LOG_LEVEL": "debug",
        }
        settings = EnvSettingsLoader(env).load(MediatorSettings)
        assert settings.strategy is PublishStrategy.PARALLEL_FAIL_FAST
        assert settings.cache_wrappers is False
        assert settings.log_level == "DEBUG"

    def test_missing_optional_variables_keep_defaults(self) -> None:
        settings = EnvSettingsLoader({}).load(MediatorSettings)
        assert settings == MediatorSettings()

    def test_prefix_is_not_read_from_environment(self) -> None:
        settings = EnvSettingsLoader({"MEDIATOR__PREFIX": "OTHER"}).load(MediatorSettings)
        assert settings._prefix == "MEDIATOR"

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDIATOR_PUBLISH_STRATEGY", "parallel_collect_all")
        settings = EnvSettingsLoader().load(MediatorSettings)
        assert settings.strategy is PublishStrategy.PARALLEL_COLLECT_ALL

    def test_invalid_value_propagates_config_error(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"MEDIATOR_PUBLISH_STRATEGY": "nope"}).load(MediatorSettings)

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_RequiredSettings)
        assert exc_info.value.setting_name == "APP_NAME"

    def test_numeric_coercion(self) -> None:
        env = {"APP_NAME": "svc", "APP_WORKERS": "4", "APP_RATIO": "0.25"}
        settings = EnvSettingsLoader(env).load(_RequiredSettings)
        assert (settings.name, settings.workers, settings.ratio) == ("svc", 4, 0.25)

    def test_bad_number_wrapped_in_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"APP_NAME": "svc", "APP_WORKERS": "many"}).load(_RequiredSettings)
