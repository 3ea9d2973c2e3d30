"""Link – missing handler policy."""
from __future__ import annotations

from enum import Enum


class MissingHandlerPolicy(str, Enum):
    """What :class:`~gql_mock.link.MockLink` does when no handler matches."""

    THROW_ERROR = "throw-error"
    WARN_AND_RETURN_ERROR = "warn-and-return-error"
    RETURN_ERROR = "return-error"


__all__ = ["MissingHandlerPolicy"]
