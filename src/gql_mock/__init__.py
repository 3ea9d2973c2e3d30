"""
gql_mock – In-process GraphQL transport test double.

Import path convention::

    from gql_mock.link import MockLink, create_mock_subscription
    from gql_mock.documents import gql, canonicalize
    from gql_mock.client import MockClient
    from gql_mock.kernel.errors import DuplicateHandlerError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
