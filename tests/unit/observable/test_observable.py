"""Unit tests for the Observable primitive."""

from __future__ import annotations

from gql_mock.observable import CallbackObserver, Observable, SubscriptionObserver
from gql_mock.testing.fakes import RecordingLogger, RecordingObserver


class TestObservable:
    def test_subscriber_runs_lazily(self) -> None:
        calls: list[str] = []

        def subscriber(observer: SubscriptionObserver) -> None:
            calls.append("subscribed")

        observable = Observable(subscriber)
        assert calls == []
        observable.subscribe(RecordingObserver())
        assert calls == ["subscribed"]

    def test_of_emits_values_then_completes(self) -> None:
        observer = RecordingObserver()
        Observable.of(1, 2).subscribe(observer)
        assert observer.calls == [("next", 1), ("next", 2), ("complete", None)]

    def test_from_error_errors_on_subscribe(self) -> None:
        err = ValueError("bad")
        observer = RecordingObserver()
        Observable.from_error(err).subscribe(observer)
        assert observer.calls == [("error", err)]

    def test_callbacks_keyword_subscription(self) -> None:
        seen: list[object] = []
        Observable.of("a").subscribe(
            on_next=seen.append, on_complete=lambda: seen.append("done")
        )
        assert seen == ["a", "done"]

    def test_error_without_handler_is_not_raised(self) -> None:
        subscription = Observable.from_error(RuntimeError("x")).subscribe(on_next=print)
        assert subscription.closed

    def test_error_without_handler_is_logged_on_injected_logger(self) -> None:
        logger = RecordingLogger()
        Observable.from_error(RuntimeError("boom")).subscribe(on_next=print, logger=logger)
        logger.assert_warned("Unhandled error in observable", times=1)

    def test_handled_error_is_not_logged(self) -> None:
        logger = RecordingLogger()
        seen: list[BaseException] = []
        Observable.from_error(RuntimeError("boom")).subscribe(on_error=seen.append, logger=logger)
        assert len(seen) == 1
        logger.assert_no_warnings()

    def test_callback_observer_accepts_logger(self) -> None:
        logger = RecordingLogger()
        CallbackObserver(logger=logger).error(ValueError("late"))
        assert logger.warnings == ["Unhandled error in observable"]

    def test_subscriber_exception_goes_to_error_channel(self) -> None:
        def subscriber(observer: SubscriptionObserver) -> None:
            raise KeyError("missing")

        observer = RecordingObserver()
        Observable(subscriber).subscribe(observer)
        assert observer.kinds == ["error"]
        assert isinstance(observer.errors[0], KeyError)


class TestSubscriptionObserver:
    def test_signals_after_complete_are_ignored(self) -> None:
        def subscriber(observer: SubscriptionObserver) -> None:
            observer.next(1)
            observer.complete()
            observer.next(2)
            observer.error(RuntimeError("late"))
            observer.complete()

        observer = RecordingObserver()
        Observable(subscriber).subscribe(observer)
        assert observer.calls == [("next", 1), ("complete", None)]

    def test_closed_reflects_state(self) -> None:
        captured: list[SubscriptionObserver] = []
        Observable(captured.append).subscribe(RecordingObserver())
        sink = captured[0]
        assert sink.closed is False
        sink.complete()
        assert sink.closed is True


class TestSubscription:
    def test_unsubscribe_runs_teardown_once(self) -> None:
        torn_down: list[int] = []

        def subscriber(observer: SubscriptionObserver):
            return lambda: torn_down.append(1)

        subscription = Observable(subscriber).subscribe(RecordingObserver())
        subscription.unsubscribe()
        subscription.unsubscribe()
        assert torn_down == [1]
        assert subscription.closed

    def test_unsubscribe_silences_observer(self) -> None:
        captured: list[SubscriptionObserver] = []

        def subscriber(observer: SubscriptionObserver) -> None:
            captured.append(observer)

        observer = RecordingObserver()
        subscription = Observable(subscriber).subscribe(observer)
        subscription.unsubscribe()
        captured[0].next("ignored")
        assert observer.calls == []

    def test_teardown_runs_when_completed_synchronously(self) -> None:
        torn_down: list[int] = []

        def subscriber(observer: SubscriptionObserver):
            observer.complete()
            return lambda: torn_down.append(1)

        Observable(subscriber).subscribe(RecordingObserver())
        assert torn_down == [1]

    def test_teardown_runs_on_complete(self) -> None:
        torn_down: list[int] = []
        captured: list[SubscriptionObserver] = []

        def subscriber(observer: SubscriptionObserver):
            captured.append(observer)
            return lambda: torn_down.append(1)

        Observable(subscriber).subscribe(RecordingObserver())
        assert torn_down == []
        captured[0].complete()
        assert torn_down == [1]
