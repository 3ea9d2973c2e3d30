"""Observable – push-based async result streams."""
from gql_mock.observable.consume import collect, first_value, iterate
from gql_mock.observable.observable import Observable, Subscriber, Subscription, Teardown
from gql_mock.observable.observer import CallbackObserver, Observer, SubscriptionObserver

__all__ = [
    "CallbackObserver",
    "Observable",
    "Observer",
    "Subscriber",
    "Subscription",
    "SubscriptionObserver",
    "Teardown",
    "collect",
    "first_value",
    "iterate",
]
