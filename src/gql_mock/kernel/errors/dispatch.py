"""Dispatch errors – raised or emitted while serving a request."""

from __future__ import annotations

from typing import Any

from gql_mock.kernel.errors.base import BaseError


class DispatchError(BaseError):
    """A request could not be served by the mock link."""

    default_code = "dispatch_error"


class MissingHandlerError(DispatchError):
    """No request handler matches the operation's query."""

    default_code = "missing_handler"

    def __init__(self, query: str, **kwargs: Any) -> None:
        super().__init__(
            f"Request handler not defined for query: {query}",
            detail={"query": query},
            **kwargs,
        )
        self.query = query


class HandlerInvocationError(DispatchError):
    """The request handler raised while being called.

    ``original_message`` keeps the message of the wrapped exception.
    """

    default_code = "handler_invocation_error"

    def __init__(self, original_message: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unexpected error whilst calling request handler: {original_message}",
            **kwargs,
        )
        self.original_message = original_message


class InvalidReturnTypeError(DispatchError):
    """The request handler returned neither an awaitable nor a subscription."""

    default_code = "invalid_return_type"

    def __init__(self, received_type: str, **kwargs: Any) -> None:
        super().__init__(
            "Request handler must return an awaitable or a MockSubscription. "
            f"Received '{received_type}'.",
            detail={"received_type": received_type},
            **kwargs,
        )
        self.received_type = received_type


class EventLoopRequiredError(DispatchError):
    """A deferred response was subscribed outside a running event loop."""

    default_code = "event_loop_required"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            "A running event loop is required to subscribe to a deferred response",
            **kwargs,
        )


__all__ = [
    "DispatchError",
    "EventLoopRequiredError",
    "HandlerInvocationError",
    "InvalidReturnTypeError",
    "MissingHandlerError",
]
