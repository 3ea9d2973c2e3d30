"""Testing fakes – recording doubles for loggers and observers."""
from gql_mock.testing.fakes.logger import RecordingLogger
from gql_mock.testing.fakes.observer import RecordingObserver

__all__ = ["RecordingLogger", "RecordingObserver"]
