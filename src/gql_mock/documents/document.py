"""Documents – parsing and printing of GraphQL query documents."""
from __future__ import annotations

from graphql import DocumentNode, parse, print_ast


def gql(source: str) -> DocumentNode:
    """Parse a GraphQL source string into a :class:`DocumentNode`.

    Example::

        GET_USER = gql('''
            query GetUser($id: ID!) { user(id: $id) { id name } }
        ''')
    """
    return parse(source)


def ensure_document(document: DocumentNode | str) -> DocumentNode:
    if isinstance(document, str):
        return gql(document)
    return document


def print_document(document: DocumentNode | str) -> str:
    return print_ast(ensure_document(document))


__all__ = ["ensure_document", "gql", "print_document"]
