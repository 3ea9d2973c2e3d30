"""Testing fixtures – pytest fixtures for the mock link.

Load them from ``conftest.py``::

    pytest_plugins = ["gql_mock.testing.fixtures"]
"""
from gql_mock.testing.fixtures.link import mock_client, mock_link, recording_logger

__all__ = ["mock_client", "mock_link", "recording_logger"]
