"""Stream errors – raised by the async consumption helpers."""

from __future__ import annotations

from gql_mock.kernel.errors.base import BaseError


class StreamError(BaseError):
    """An observable could not be consumed as requested."""

    default_code = "stream_error"


class EmptyStreamError(StreamError):
    """The observable completed without emitting a value."""

    default_code = "empty_stream"

    def __init__(self, message: str = "Observable completed without emitting a value") -> None:
        super().__init__(message)


__all__ = ["EmptyStreamError", "StreamError"]
