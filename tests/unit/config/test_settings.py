"""Unit tests for config settings & validation."""

import dataclasses
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from causal_option.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from causal_option.kernel.errors import BaseError


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_from_explicit_mapping(self) -> None:
        settings = EnvSettingsLoader({"APP_PORT": "9000", "APP_RATIO": "0.25"}).load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    @pytest.mark.parametrize("raw", ["true", "True", "1", "yes", "on"])
    def test_loads_bool_true(self, raw: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": raw}).load(AppSettings).debug is True

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off"])
    def test_loads_bool_false(self, raw: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": raw}).load(AppSettings).debug is False

    def test_rejects_unknown_bool(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader({"APP_DEBUG": "maybe"}).load(AppSettings)
        assert info.value.setting_name == "APP_DEBUG"

    def test_rejects_bad_int(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)

    def test_rejects_bad_float(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_RATIO": "half"}).load(AppSettings)

    def test_loads_list(self) -> None:
        settings = EnvSettingsLoader({"APP_ALLOWED_ORIGINS": "http://a.com, http://b.com,"}).load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings == AppSettings()

    def test_missing_required_raises(self) -> None:
        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str = dataclasses.field()

        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(StrictSettings)
        assert "STRICT_REQUIRED_FIELD" in str(exc_info.value)

    def test_construction_failure_wrapped(self) -> None:
        @dataclass
        class Exploding(Settings):
            _prefix: ClassVar[str] = "BOOM"
            value: str = "x"

            def _validate(self) -> None:
                raise RuntimeError("kaboom")

        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader({}).load(Exploding)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_validation_error_not_rewrapped(self) -> None:
        @dataclass
        class Ranged(Settings):
            _prefix: ClassVar[str] = "RANGED"
            level: int = 1

            def _validate(self) -> None:
                if self.level > 3:
                    raise InvalidSettingValueError("level", self.level, "must be <= 3")

        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"RANGED_LEVEL": "7"}).load(Ranged)


# ---------------------------------------------------------------------------
# ConfigErrors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_missing_required_setting_stores_name(self) -> None:
        err = MissingRequiredSettingError("OPTION_CODEC_INDENT")
        assert err.setting_name == "OPTION_CODEC_INDENT"
        assert err.code == "missing_required_setting"
        assert "OPTION_CODEC_INDENT" in str(err)

    def test_invalid_value_stores_details(self) -> None:
        err = InvalidSettingValueError("indent", -1, "must be >= 0")
        assert (err.setting_name, err.value, err.reason) == ("indent", -1, "must be >= 0")
        assert "-1" in str(err)
        assert err.to_dict()["detail"] == {"setting": "indent", "value": "-1", "reason": "must be >= 0"}

    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(ConfigError, BaseError)
