"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── RegistrationError        (registration.py)
    │   └── DuplicateHandlerError
    ├── DispatchError            (dispatch.py)
    │   ├── MissingHandlerError
    │   ├── HandlerInvocationError
    │   ├── InvalidReturnTypeError
    │   └── EventLoopRequiredError
    ├── StreamError              (stream.py)
    │   └── EmptyStreamError
    └── ConfigError              (gql_mock.config.validation)
"""

from gql_mock.kernel.errors.base import BaseError
from gql_mock.kernel.errors.dispatch import (
    DispatchError,
    EventLoopRequiredError,
    HandlerInvocationError,
    InvalidReturnTypeError,
    MissingHandlerError,
)
from gql_mock.kernel.errors.registration import DuplicateHandlerError, RegistrationError
from gql_mock.kernel.errors.stream import EmptyStreamError, StreamError

__all__ = [
    "BaseError",
    "DispatchError",
    "DuplicateHandlerError",
    "EmptyStreamError",
    "EventLoopRequiredError",
    "HandlerInvocationError",
    "InvalidReturnTypeError",
    "MissingHandlerError",
    "RegistrationError",
    "StreamError",
]
