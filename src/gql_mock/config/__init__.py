"""Configuration – settings dataclasses, loaders and validation errors."""
from gql_mock.config.settings import EnvSettingsLoader, MockLinkSettings, Settings, SettingsLoader
from gql_mock.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "MockLinkSettings",
    "Settings",
    "SettingsLoader",
]
