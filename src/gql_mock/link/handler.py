"""Link – request handler result variants.

Handlers hand their response back as one of two tagged variants:

* :class:`Deferred` – a single response delivered when an awaitable settles;
* :class:`Stream` – a :class:`MockSubscription` the handler drives itself.

Usage::

    link.set_request_handler(GET_USER, lambda v: deferred(fetch_user(v)))
    link.set_request_handler(ON_MESSAGE, lambda v: stream(subscription))

Plain awaitables (``async def`` handlers) and bare subscriptions are
normalised into these variants by :func:`as_handler_result`.
"""
from __future__ import annotations

import inspect
from enum import Enum
from typing import Any, Awaitable, Callable, ClassVar, Mapping, Union

from gql_mock.kernel.errors import InvalidReturnTypeError
from gql_mock.link.subscription import MockSubscription


class HandlerResultKind(str, Enum):
    DEFERRED = "deferred"
    STREAM = "stream"


class Deferred:
    """Single response variant."""

    __slots__ = ("_awaitable",)

    kind: ClassVar[HandlerResultKind] = HandlerResultKind.DEFERRED

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self._awaitable = awaitable

    @property
    def awaitable(self) -> Awaitable[Any]:
        return self._awaitable

    def __repr__(self) -> str:
        return f"Deferred({self._awaitable!r})"


class Stream:
    """Multi-response variant driven by the handler."""

    __slots__ = ("_subscription",)

    kind: ClassVar[HandlerResultKind] = HandlerResultKind.STREAM

    def __init__(self, subscription: MockSubscription) -> None:
        self._subscription = subscription

    @property
    def subscription(self) -> MockSubscription:
        return self._subscription

    def __repr__(self) -> str:
        return f"Stream({self._subscription!r})"


HandlerResult = Union[Deferred, Stream]
RequestHandler = Callable[[Mapping[str, Any]], Any]


def deferred(awaitable: Awaitable[Any]) -> Deferred:
    return Deferred(awaitable)


def stream(subscription: MockSubscription) -> Stream:
    return Stream(subscription)


def as_handler_result(returned: Any) -> HandlerResult:
    """Normalise a handler's return value into a tagged variant.

    Raises :class:`InvalidReturnTypeError` for anything that is neither an
    awaitable nor a :class:`MockSubscription`.
    """
    if isinstance(returned, (Deferred, Stream)):
        return returned
    if isinstance(returned, MockSubscription):
        return Stream(returned)
    if inspect.isawaitable(returned):
        return Deferred(returned)
    raise InvalidReturnTypeError(type(returned).__name__)


__all__ = [
    "Deferred",
    "HandlerResult",
    "HandlerResultKind",
    "RequestHandler",
    "Stream",
    "as_handler_result",
    "deferred",
    "stream",
]
