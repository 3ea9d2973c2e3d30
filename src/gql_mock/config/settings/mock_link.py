"""Config settings – MockLinkSettings."""
from __future__ import annotations

import dataclasses

from gql_mock.config.settings.base import Settings
from gql_mock.config.validation import InvalidSettingValueError

_POLICIES = ("throw-error", "warn-and-return-error", "return-error")


@dataclasses.dataclass
class MockLinkSettings(Settings):
    """Construction-time defaults for :class:`~gql_mock.link.MockLink`.

    Loaded from ``GQL_MOCK_MISSING_HANDLER_POLICY`` and
    ``GQL_MOCK_DISABLE_SUBSCRIPTION_LOGGING`` by
    :class:`~gql_mock.config.settings.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "GQL_MOCK"

    missing_handler_policy: str = "throw-error"
    disable_subscription_logging: bool = False

    def _validate(self) -> None:
        if self.missing_handler_policy not in _POLICIES:
            raise InvalidSettingValueError(
                "missing_handler_policy",
                self.missing_handler_policy,
                f"expected one of {', '.join(_POLICIES)}",
            )


__all__ = ["MockLinkSettings"]
