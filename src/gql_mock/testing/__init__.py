"""Testing support – fakes, fixtures and generators.

Import in your ``conftest.py``::

    pytest_plugins = ["gql_mock.testing.fixtures"]
"""

from gql_mock.testing.fakes import RecordingLogger, RecordingObserver

__all__ = ["RecordingLogger", "RecordingObserver"]
