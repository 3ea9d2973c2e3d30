"""Link – request handler registry, subscription adapter and dispatcher."""
from gql_mock.link.handler import (
    Deferred,
    HandlerResult,
    HandlerResultKind,
    RequestHandler,
    Stream,
    as_handler_result,
    deferred,
    stream,
)
from gql_mock.link.link import MockLink
from gql_mock.link.operation import Operation
from gql_mock.link.policy import MissingHandlerPolicy
from gql_mock.link.registry import RequestHandlerRegistry
from gql_mock.link.subscription import MockSubscription, create_mock_subscription

__all__ = [
    "Deferred",
    "HandlerResult",
    "HandlerResultKind",
    "MissingHandlerPolicy",
    "MockLink",
    "MockSubscription",
    "Operation",
    "RequestHandler",
    "RequestHandlerRegistry",
    "Stream",
    "as_handler_result",
    "create_mock_subscription",
    "deferred",
    "stream",
]
