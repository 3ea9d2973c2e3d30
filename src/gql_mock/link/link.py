"""Link – MockLink, the request dispatcher.

``MockLink.request`` has the shape of a GraphQL client link: it takes an
:class:`Operation` and returns an :class:`Observable` of response values.
Instead of reaching a server it canonicalises the query, looks up the handler
registered for it and adapts the handler's result to the observer protocol.
"""
from __future__ import annotations

import asyncio
import inspect
import weakref
from typing import Any, Awaitable

from graphql import DocumentNode

from gql_mock.config.settings import MockLinkSettings
from gql_mock.documents import canonicalize, print_document
from gql_mock.kernel.errors import (
    EventLoopRequiredError,
    HandlerInvocationError,
    InvalidReturnTypeError,
    MissingHandlerError,
)
from gql_mock.link.handler import HandlerResultKind, RequestHandler, as_handler_result
from gql_mock.link.operation import Operation
from gql_mock.link.policy import MissingHandlerPolicy
from gql_mock.link.registry import RequestHandlerRegistry
from gql_mock.link.subscription import MockSubscription
from gql_mock.observability.logging import Logger, get_logger
from gql_mock.observable import Observable, SubscriptionObserver


class _SharedResponse:
    """Deferred response awaited at most once, on the first subscription.

    Every subscriber shares the same future.  A coroutine no subscriber ever
    started is closed by :meth:`discard` once its observable is collected.
    """

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        self._awaitable = awaitable
        self._future: asyncio.Future[Any] | None = None

    def start(self, loop: asyncio.AbstractEventLoop) -> asyncio.Future[Any]:
        if self._future is None:
            self._future = asyncio.ensure_future(self._awaitable, loop=loop)
        return self._future

    def discard(self) -> None:
        if self._future is None and inspect.iscoroutine(self._awaitable):
            self._awaitable.close()


class MockLink:
    """In-process stand-in for a GraphQL network link.

    Parameters
    ----------
    missing_handler_policy:
        Behaviour when no handler matches; overrides *settings*.
    logger:
        Warning sink shared with the registry; defaults to a structlog
        logger.
    settings:
        Construction defaults, e.g. loaded with
        ``EnvSettingsLoader().load(MockLinkSettings)``.
    """

    def __init__(
        self,
        *,
        missing_handler_policy: MissingHandlerPolicy | str | None = None,
        logger: Logger | None = None,
        settings: MockLinkSettings | None = None,
    ) -> None:
        self._settings = settings or MockLinkSettings()
        self._policy = MissingHandlerPolicy(
            missing_handler_policy or self._settings.missing_handler_policy
        )
        self._logger: Logger = logger or get_logger("gql_mock.link")
        self._registry = RequestHandlerRegistry(logger=self._logger)
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def missing_handler_policy(self) -> MissingHandlerPolicy:
        return self._policy

    @property
    def registry(self) -> RequestHandlerRegistry:
        return self._registry

    @property
    def pending(self) -> int:
        """Number of deferred responses still waiting to settle."""
        return len(self._pending)

    async def settle(self) -> None:
        """Wait until every deferred response subscribed so far was delivered."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def set_request_handler(
        self,
        document: DocumentNode | str,
        handler: RequestHandler,
        *,
        replace: bool = False,
    ) -> None:
        self._registry.register(document, handler, replace=replace)

    def create_mock_subscription(self, *, disable_logging: bool | None = None) -> MockSubscription:
        """Subscription sharing this link's logger and logging settings."""
        if disable_logging is None:
            disable_logging = self._settings.disable_subscription_logging
        return MockSubscription(disable_logging=disable_logging, logger=self._logger)

    def request(self, operation: Operation) -> Observable[Any]:
        """Serve *operation* from the matching request handler.

        Raises
        ------
        MissingHandlerError
            Only under :attr:`MissingHandlerPolicy.THROW_ERROR`; every other
            failure is delivered through the observable's error channel.
        """
        handler = self._registry.lookup(canonicalize(operation.query))
        if handler is None:
            return self._missing_handler(operation)

        try:
            returned = handler(operation.variables)
        except Exception as exc:  # noqa: BLE001 – surfaced on the error channel
            message = getattr(exc, "message", None) or str(exc)
            return Observable.from_error(HandlerInvocationError(message, cause=exc))

        try:
            result = as_handler_result(returned)
        except InvalidReturnTypeError as exc:
            return Observable.from_error(exc)

        if result.kind is HandlerResultKind.DEFERRED:
            return self._deferred_observable(result.awaitable)  # type: ignore[union-attr]

        subscription = result.subscription  # type: ignore[union-attr]
        return Observable(lambda observer: subscription.attach(observer))

    dispatch = request

    def _missing_handler(self, operation: Operation) -> Observable[Any]:
        error = MissingHandlerError(print_document(operation.query))
        if self._policy is MissingHandlerPolicy.THROW_ERROR:
            raise error
        if self._policy is MissingHandlerPolicy.WARN_AND_RETURN_ERROR:
            self._logger.warning(error.message, operation_name=operation.operation_name)
        return Observable.from_error(error)

    def _deferred_observable(self, awaitable: Awaitable[Any]) -> Observable[Any]:
        response = _SharedResponse(awaitable)

        def subscriber(observer: SubscriptionObserver[Any]) -> None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
            if loop is None:
                observer.error(EventLoopRequiredError())
                return
            self._settle(response.start(loop), observer)

        observable = Observable(subscriber)
        weakref.finalize(observable, response.discard)
        return observable

    def _settle(self, awaitable: Awaitable[Any], observer: SubscriptionObserver[Any]) -> None:
        # teardown is a no-op: the awaitable keeps running after unsubscribe
        task = asyncio.get_running_loop().create_task(self._deliver(awaitable, observer))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    @staticmethod
    async def _deliver(awaitable: Awaitable[Any], observer: SubscriptionObserver[Any]) -> None:
        try:
            value = await awaitable
        except Exception as exc:  # noqa: BLE001 – surfaced on the error channel
            observer.error(exc)
            return
        observer.next(value)
        observer.complete()


__all__ = ["MockLink"]
