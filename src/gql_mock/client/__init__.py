"""Client – awaitable facade over the mock link."""
from gql_mock.client.client import MockClient, create_mock_client

__all__ = ["MockClient", "create_mock_client"]
