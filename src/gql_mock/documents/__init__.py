"""Documents – parsing, node-removal transforms and canonical request keys."""
from gql_mock.documents.canonical import (
    EMPTY_REQUEST_KEY,
    canonicalize,
    is_empty_request_key,
    strip_local_artifacts,
)
from gql_mock.documents.document import ensure_document, gql, print_document
from gql_mock.documents.transforms import (
    DirectiveRemoval,
    remove_client_fields,
    remove_connection_directives,
    remove_directive_nodes,
    remove_fields,
    remove_typename_fields,
)

__all__ = [
    "EMPTY_REQUEST_KEY",
    "DirectiveRemoval",
    "canonicalize",
    "ensure_document",
    "gql",
    "is_empty_request_key",
    "print_document",
    "remove_client_fields",
    "remove_connection_directives",
    "remove_directive_nodes",
    "remove_fields",
    "remove_typename_fields",
    "strip_local_artifacts",
]
