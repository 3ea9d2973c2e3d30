"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from gql_mock.config.settings import EnvSettingsLoader, MockLinkSettings, Settings
from gql_mock.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com,http://b.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_explicit_environ_mapping(self) -> None:
        settings = EnvSettingsLoader({"APP_PORT": "1234"}).load(AppSettings)
        assert settings.port == 1234
        assert settings.host == "localhost"

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_bad_coercion_raises_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"APP_PORT": "not-a-number"}).load(AppSettings)


class TestMockLinkSettings:
    def test_defaults(self) -> None:
        settings = MockLinkSettings()
        assert settings.missing_handler_policy == "throw-error"
        assert settings.disable_subscription_logging is False

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GQL_MOCK_MISSING_HANDLER_POLICY", "warn-and-return-error")
        monkeypatch.setenv("GQL_MOCK_DISABLE_SUBSCRIPTION_LOGGING", "true")
        settings = EnvSettingsLoader().load(MockLinkSettings)
        assert settings.missing_handler_policy == "warn-and-return-error"
        assert settings.disable_subscription_logging is True

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            MockLinkSettings(missing_handler_policy="ignore")
        assert exc_info.value.setting_name == "missing_handler_policy"

    def test_unknown_policy_from_environment_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"GQL_MOCK_MISSING_HANDLER_POLICY": "nope"}).load(MockLinkSettings)
