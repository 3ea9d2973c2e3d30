"""Config settings – 12-factor env-based configuration."""
from gql_mock.config.settings.base import Settings
from gql_mock.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from gql_mock.config.settings.mock_link import MockLinkSettings

__all__ = ["EnvSettingsLoader", "MockLinkSettings", "Settings", "SettingsLoader"]
