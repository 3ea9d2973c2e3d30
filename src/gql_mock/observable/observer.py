"""Observable – Observer protocol and SubscriptionObserver."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Protocol, TypeVar

from gql_mock.observability.logging import Logger, get_logger

if TYPE_CHECKING:
    from gql_mock.observable.observable import Subscription

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Observer(Protocol[T_contra]):
    """Push-based consumer of an observable stream."""

    def next(self, value: T_contra) -> None: ...
    def error(self, error: BaseException) -> None: ...
    def complete(self) -> None: ...


class CallbackObserver(Generic[T]):
    """Observer assembled from optional callbacks.

    An error arriving without *on_error* is logged as a warning on *logger*
    and never raised into the producer.
    """

    def __init__(
        self,
        on_next: Callable[[T], Any] | None = None,
        on_error: Callable[[BaseException], Any] | None = None,
        on_complete: Callable[[], Any] | None = None,
        *,
        logger: Logger | None = None,
    ) -> None:
        self.on_next = on_next
        self.on_error = on_error
        self.on_complete = on_complete
        self._logger: Logger = logger or get_logger("gql_mock.observable")

    def next(self, value: T) -> None:
        if self.on_next is not None:
            self.on_next(value)

    def error(self, error: BaseException) -> None:
        if self.on_error is None:
            self._logger.warning("Unhandled error in observable", error=repr(error))
            return
        self.on_error(error)

    def complete(self) -> None:
        if self.on_complete is not None:
            self.on_complete()


class SubscriptionObserver(Generic[T]):
    """Observer handed to an observable's subscriber function.

    Enforces the observer contract: once ``error`` or ``complete`` has been
    delivered, or the subscription was cancelled, every further signal is
    ignored.
    """

    def __init__(self, subscription: Subscription[T], observer: Observer[T]) -> None:
        self._subscription = subscription
        self._observer = observer

    @property
    def closed(self) -> bool:
        return self._subscription.closed

    def next(self, value: T) -> None:
        if self.closed:
            return
        self._observer.next(value)

    def error(self, error: BaseException) -> None:
        if self.closed:
            return
        self._subscription._close()
        try:
            self._observer.error(error)
        finally:
            self._subscription._cleanup()

    def complete(self) -> None:
        if self.closed:
            return
        self._subscription._close()
        try:
            self._observer.complete()
        finally:
            self._subscription._cleanup()


__all__ = ["CallbackObserver", "Observer", "SubscriptionObserver"]
