"""Observable – push-based multi-value stream.

Modelled on the zen-observable contract used by GraphQL client links:
a subscriber function receives a :class:`SubscriptionObserver` when a
consumer subscribes and may return a teardown callable.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from gql_mock.observability.logging import Logger
from gql_mock.observable.observer import CallbackObserver, Observer, SubscriptionObserver

T = TypeVar("T")

Teardown = Callable[[], Any]
Subscriber = Callable[[SubscriptionObserver[T]], Teardown | None]


class Subscription(Generic[T]):
    """Handle returned by :meth:`Observable.subscribe`."""

    def __init__(self, observer: Observer[T], subscriber: Subscriber[T]) -> None:
        self._closed = False
        self._teardown: Teardown | None = None
        self._observer = SubscriptionObserver(self, observer)

        try:
            teardown = subscriber(self._observer)
        except Exception as exc:  # noqa: BLE001 – routed to the error channel
            self._observer.error(exc)
            return

        self._teardown = teardown
        if self._closed:
            self._cleanup()

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        if self._closed:
            return
        self._close()
        self._cleanup()

    def _close(self) -> None:
        self._closed = True

    def _cleanup(self) -> None:
        teardown, self._teardown = self._teardown, None
        if teardown is not None:
            teardown()


class Observable(Generic[T]):
    """Lazy stream: nothing runs until :meth:`subscribe` is called."""

    def __init__(self, subscriber: Subscriber[T]) -> None:
        self._subscriber = subscriber

    def subscribe(
        self,
        observer: Observer[T] | None = None,
        *,
        on_next: Callable[[T], Any] | None = None,
        on_error: Callable[[BaseException], Any] | None = None,
        on_complete: Callable[[], Any] | None = None,
        logger: Logger | None = None,
    ) -> Subscription[T]:
        """Start the stream.

        Pass an *observer* or the keyword callbacks; *logger* receives the
        warning for an error that arrives with no *on_error* callback.
        """
        if observer is None:
            observer = CallbackObserver(on_next, on_error, on_complete, logger=logger)
        return Subscription(observer, self._subscriber)

    @classmethod
    def of(cls, *values: T) -> Observable[T]:
        """Observable that emits *values* synchronously then completes."""

        def subscriber(observer: SubscriptionObserver[T]) -> None:
            for value in values:
                observer.next(value)
            observer.complete()

        return cls(subscriber)

    @classmethod
    def from_error(cls, error: BaseException) -> Observable[T]:
        """Observable that errors with *error* as soon as it is subscribed."""

        def subscriber(observer: SubscriptionObserver[T]) -> None:
            observer.error(error)

        return cls(subscriber)


__all__ = ["Observable", "Subscriber", "Subscription", "Teardown"]
