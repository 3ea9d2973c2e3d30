"""Client – MockClient facade over a MockLink."""
from __future__ import annotations

from typing import Any, AsyncIterator, Mapping

from graphql import DocumentNode

from gql_mock.link import MissingHandlerPolicy, MockLink, Operation, RequestHandler
from gql_mock.observability.logging import Logger
from gql_mock.observable import first_value, iterate


class MockClient:
    """Await responses from a :class:`MockLink` like a GraphQL client would.

    Usage::

        client = create_mock_client()
        client.set_request_handler(GET_USER, get_user_handler)
        result = await client.query(GET_USER, {"id": "1"})
        assert result == {"data": {"user": {"id": "1"}}}
    """

    def __init__(
        self,
        link: MockLink | None = None,
        *,
        missing_handler_policy: MissingHandlerPolicy | str | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._link = link or MockLink(missing_handler_policy=missing_handler_policy, logger=logger)

    @property
    def link(self) -> MockLink:
        return self._link

    def set_request_handler(
        self,
        document: DocumentNode | str,
        handler: RequestHandler,
        *,
        replace: bool = False,
    ) -> None:
        self._link.set_request_handler(document, handler, replace=replace)

    async def execute(
        self,
        document: DocumentNode | str,
        variables: Mapping[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> Any:
        """Send a query or mutation and return the first response value."""
        operation = Operation.create(document, variables, operation_name)
        return await first_value(self._link.request(operation))

    query = execute
    mutate = execute

    async def subscribe(
        self,
        document: DocumentNode | str,
        variables: Mapping[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> AsyncIterator[Any]:
        """Yield every response value the handler emits until it completes."""
        operation = Operation.create(document, variables, operation_name)
        async for value in iterate(self._link.request(operation)):
            yield value


def create_mock_client(**kwargs: Any) -> MockClient:
    return MockClient(**kwargs)


__all__ = ["MockClient", "create_mock_client"]
