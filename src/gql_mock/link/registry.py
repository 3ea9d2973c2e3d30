"""Link – RequestHandlerRegistry."""
from __future__ import annotations

from typing import Iterator

from graphql import DocumentNode

from gql_mock.documents import canonicalize, is_empty_request_key, print_document
from gql_mock.kernel.errors import DuplicateHandlerError
from gql_mock.link.handler import RequestHandler
from gql_mock.observability.logging import Logger, get_logger


class RequestHandlerRegistry:
    """Canonical request key → handler mapping owned by one link.

    Usage::

        registry = RequestHandlerRegistry()
        registry.register(GET_USER, handler)
        registry.lookup(canonicalize(GET_USER))  # -> handler
    """

    def __init__(self, logger: Logger | None = None) -> None:
        self._handlers: dict[str, RequestHandler] = {}
        self._logger: Logger = logger or get_logger("gql_mock.registry")

    def register(
        self,
        document: DocumentNode | str,
        handler: RequestHandler,
        *,
        replace: bool = False,
    ) -> None:
        """Register *handler* for *document*.

        Raises
        ------
        DuplicateHandlerError
            When a handler already exists for the same canonical key and
            *replace* is not set.
        """
        key = canonicalize(document)

        if is_empty_request_key(key):
            self._logger.warning(
                "Query document contains only client-side fields, "
                "the request handler will never be called",
                query=print_document(document),
            )
            return

        if key in self._handlers and not replace:
            raise DuplicateHandlerError(print_document(document))

        self._handlers[key] = handler

    def lookup(self, key: str) -> RequestHandler | None:
        return self._handlers.get(key)

    def keys(self) -> list[str]:
        return list(self._handlers)

    def clear(self) -> None:
        self._handlers.clear()

    def __contains__(self, document: object) -> bool:
        if not isinstance(document, (DocumentNode, str)):
            return False
        return canonicalize(document) in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)


__all__ = ["RequestHandlerRegistry"]
