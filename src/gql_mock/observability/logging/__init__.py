"""Observability – structured logging ports and helpers."""
from gql_mock.observability.logging.protocol import LogEvent, Logger
from gql_mock.observability.logging.processors import get_logger

__all__ = ["LogEvent", "Logger", "get_logger"]
