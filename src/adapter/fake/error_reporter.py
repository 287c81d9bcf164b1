"""In-memory implementation of ErrorReporterPort for testing."""

from typing import NoReturn

from domain.model.errors import ConfigurationError


class FakeErrorReporter:
    """Fake error reporter that records every message it receives."""

    def __init__(self):
        self.errors: list[str] = []
        self.thrown: list[str] = []

    def log_error(self, message: str) -> None:
        self.errors.append(message)

    def throw(self, message: str) -> NoReturn:
        self.thrown.append(message)
        raise ConfigurationError(message)
