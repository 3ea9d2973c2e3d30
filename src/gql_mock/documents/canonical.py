"""Documents – canonical request keys.

Two documents that differ only in ``@client`` fields, ``@connection``
directives, ``__typename`` fields or formatting map to the same key.
"""
from __future__ import annotations

import json

from graphql import DocumentNode, print_ast

from gql_mock.documents.document import ensure_document
from gql_mock.documents.transforms import (
    DirectiveRemoval,
    remove_directive_nodes,
    remove_typename_fields,
)


def _encode(query: str | None) -> str:
    return json.dumps({"query": query}, sort_keys=True, separators=(",", ":"))


EMPTY_REQUEST_KEY = _encode(None)


def strip_local_artifacts(document: DocumentNode | str) -> DocumentNode | None:
    """Return the part of *document* a transport would send to a server.

    ``__typename`` is judged against the selections as written, so a
    selection set left holding only ``__typename`` after ``@client``
    removal collapses like any other emptied set.
    """
    return remove_directive_nodes(
        remove_typename_fields(ensure_document(document)),
        DirectiveRemoval(name="client", remove_field=True),
        DirectiveRemoval(name="connection"),
    )


def canonicalize(document: DocumentNode | str) -> str:
    """Derive the lookup key for *document*.

    Returns :data:`EMPTY_REQUEST_KEY` when the document is entirely
    client-local.
    """
    stripped = strip_local_artifacts(document)
    return _encode(print_ast(stripped) if stripped is not None else None)


def is_empty_request_key(key: str) -> bool:
    return key == EMPTY_REQUEST_KEY


__all__ = ["EMPTY_REQUEST_KEY", "canonicalize", "is_empty_request_key", "strip_local_artifacts"]
