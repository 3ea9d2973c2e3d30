"""Registration errors – raised synchronously by ``set_request_handler``."""

from __future__ import annotations

from typing import Any

from gql_mock.kernel.errors.base import BaseError


class RegistrationError(BaseError):
    """A request handler could not be registered."""

    default_code = "registration_error"


class DuplicateHandlerError(RegistrationError):
    """A handler is already registered for the query's canonical key."""

    default_code = "duplicate_handler"

    def __init__(self, query: str, **kwargs: Any) -> None:
        super().__init__(
            f"Request handler already defined for query: {query}. "
            "You can replace this handler with the 'replace' option",
            detail={"query": query},
            **kwargs,
        )
        self.query = query


__all__ = ["DuplicateHandlerError", "RegistrationError"]
