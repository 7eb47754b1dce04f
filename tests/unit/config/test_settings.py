"""Unit tests for config settings & validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from mp_metrics.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MetricsSettings,
    MissingRequiredSettingError,
    Settings,
)


@dataclass
class ExporterSettings(Settings):
    _prefix: ClassVar[str] = "EXPORTER"

    namespace: str = "app"
    max_families: int = 100


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    namespace: str


@dataclass
class ListSettings(Settings):
    _prefix: ClassVar[str] = "LST"

    buckets: list[str] = field(default_factory=list)


class TestEnvKeys:
    def test_prefixed_upper_case(self) -> None:
        assert MetricsSettings.env_keys() == {
            "log_level": "MP_METRICS_LOG_LEVEL",
            "cardinality_warning_threshold": "MP_METRICS_CARDINALITY_WARNING_THRESHOLD",
        }

    def test_no_prefix(self) -> None:
        @dataclass
        class Bare(Settings):
            name: str = "x"

        assert Bare.env_keys() == {"name": "NAME"}


class TestEnvSettingsLoader:
    def test_postponed_annotations_are_resolved(self) -> None:
        settings = EnvSettingsLoader(
            environ={"EXPORTER_NAMESPACE": "shop", "EXPORTER_MAX_FAMILIES": "7"}
        ).load(ExporterSettings)
        assert settings.namespace == "shop"
        assert settings.max_families == 7
        assert isinstance(settings.max_families, int)

    def test_defaults_preserved(self) -> None:
        settings = EnvSettingsLoader(environ={}).load(ExporterSettings)
        assert settings.namespace == "app"
        assert settings.max_families == 100

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPORTER_NAMESPACE", "from-env")
        assert EnvSettingsLoader().load(ExporterSettings).namespace == "from-env"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_NAMESPACE"

    def test_unsupported_field_type_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported settings type"):
            EnvSettingsLoader(environ={"LST_BUCKETS": "a,b"}).load(ListSettings)

    def test_unsupported_field_type_unset_keeps_default(self) -> None:
        assert EnvSettingsLoader(environ={}).load(ListSettings).buckets == []


class TestMetricsSettings:
    def test_defaults(self) -> None:
        settings = MetricsSettings()
        assert settings.log_level == "INFO"
        assert settings.cardinality_warning_threshold == 0

    def test_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MP_METRICS_LOG_LEVEL", "debug")
        monkeypatch.setenv("MP_METRICS_CARDINALITY_WARNING_THRESHOLD", "1000")
        settings = EnvSettingsLoader().load(MetricsSettings)
        assert settings.log_level == "debug"
        assert settings.cardinality_warning_threshold == 1000

    def test_non_integer_threshold(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(
                environ={"MP_METRICS_CARDINALITY_WARNING_THRESHOLD": "lots"}
            ).load(MetricsSettings)
        assert exc_info.value.setting_name == "MP_METRICS_CARDINALITY_WARNING_THRESHOLD"
        assert isinstance(exc_info.value, ConfigError)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            MetricsSettings(log_level="LOUD")

    def test_negative_threshold(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            MetricsSettings(cardinality_warning_threshold=-1)

    def test_validation_error_surfaces_through_loader(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"MP_METRICS_LOG_LEVEL": "LOUD"}).load(MetricsSettings)
