"""Link – MockSubscription, a handler-owned multi-value emitter."""
from __future__ import annotations

from typing import Any

from gql_mock.observability.logging import Logger, get_logger
from gql_mock.observable import Observer

_OVERRIDE_WARNING = "Subscription observer should probably not be overridden"
_NO_OBSERVER_WARNING = "Subscription has no observer, this will have no effect"
_CLOSED_WARNING = "Subscription is closed, this will have no effect"


class MockSubscription:
    """Handler-owned emitter bridged to a single downstream observer.

    The handler may call :meth:`next`, :meth:`error` and :meth:`complete` at
    any time relative to when the client subscribes.  Calls made before an
    observer is attached, or after the stream closed, are no-ops that log a
    warning (unless *disable_logging* is set) instead of raising.

    Usage::

        subscription = create_mock_subscription()
        link.set_request_handler(ON_MESSAGE, lambda variables: subscription)
        ...
        subscription.next({"data": {"message": "hi"}})
        subscription.complete()
    """

    def __init__(self, *, disable_logging: bool = False, logger: Logger | None = None) -> None:
        self._observer: Observer[Any] | None = None
        self._finished = False
        self._logging_disabled = disable_logging
        self._logger: Logger = logger or get_logger("gql_mock.subscription")

    def attach(self, observer: Observer[Any]) -> None:
        if self._observer is not None and not self._logging_disabled:
            self._logger.warning(_OVERRIDE_WARNING)
        self._observer = observer

    @property
    def attached(self) -> bool:
        return self._observer is not None

    @property
    def closed(self) -> bool:
        if self._observer is None or self._finished:
            return True
        return bool(getattr(self._observer, "closed", False))

    def next(self, value: Any) -> None:
        if self._can_emit():
            self._observer.next(value)  # type: ignore[union-attr]

    def error(self, error: BaseException) -> None:
        if self._can_emit():
            self._finished = True
            self._observer.error(error)  # type: ignore[union-attr]

    def complete(self) -> None:
        if self._can_emit():
            self._finished = True
            self._observer.complete()  # type: ignore[union-attr]

    def _can_emit(self) -> bool:
        if self._observer is None:
            self._warn(_NO_OBSERVER_WARNING)
            return False
        if self.closed:
            self._warn(_CLOSED_WARNING)
            return False
        return True

    def _warn(self, message: str) -> None:
        if not self._logging_disabled:
            self._logger.warning(message)

    def __repr__(self) -> str:
        return f"MockSubscription(attached={self.attached}, closed={self.closed})"


def create_mock_subscription(
    *, disable_logging: bool = False, logger: Logger | None = None
) -> MockSubscription:
    return MockSubscription(disable_logging=disable_logging, logger=logger)


__all__ = ["MockSubscription", "create_mock_subscription"]
