"""Observable – awaiting observables from asyncio code."""
from __future__ import annotations

import asyncio
from typing import AsyncIterator, TypeVar

from gql_mock.kernel.errors import EmptyStreamError
from gql_mock.observable.observable import Observable

T = TypeVar("T")

_DONE = object()


async def first_value(observable: Observable[T]) -> T:
    """Await the first value emitted by *observable*.

    Raises the stream's error, or :class:`EmptyStreamError` when it completes
    without emitting anything.
    """
    future: asyncio.Future[T] = asyncio.get_running_loop().create_future()

    def on_next(value: T) -> None:
        if not future.done():
            future.set_result(value)

    def on_error(error: BaseException) -> None:
        if not future.done():
            future.set_exception(error)

    def on_complete() -> None:
        if not future.done():
            future.set_exception(EmptyStreamError())

    subscription = observable.subscribe(on_next=on_next, on_error=on_error, on_complete=on_complete)
    try:
        return await future
    finally:
        subscription.unsubscribe()


async def collect(observable: Observable[T]) -> list[T]:
    """Await completion of *observable* and return every emitted value."""
    values: list[T] = []
    future: asyncio.Future[list[T]] = asyncio.get_running_loop().create_future()

    def on_error(error: BaseException) -> None:
        if not future.done():
            future.set_exception(error)

    def on_complete() -> None:
        if not future.done():
            future.set_result(values)

    subscription = observable.subscribe(on_next=values.append, on_error=on_error, on_complete=on_complete)
    try:
        return await future
    finally:
        subscription.unsubscribe()


async def iterate(observable: Observable[T]) -> AsyncIterator[T]:
    """Iterate over the values of *observable*.

    Leaving the loop early unsubscribes from the stream.
    """
    queue: asyncio.Queue[object] = asyncio.Queue()

    subscription = observable.subscribe(
        on_next=queue.put_nowait,
        on_error=lambda error: queue.put_nowait(_Failure(error)),
        on_complete=lambda: queue.put_nowait(_DONE),
    )
    try:
        while True:
            item = await queue.get()
            if item is _DONE:
                return
            if isinstance(item, _Failure):
                raise item.error
            yield item  # type: ignore[misc]
    finally:
        subscription.unsubscribe()


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


__all__ = ["collect", "first_value", "iterate"]
