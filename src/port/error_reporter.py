"""Error reporter port — sink for human-readable configuration messages."""

from typing import NoReturn, Protocol


class ErrorReporterPort(Protocol):
    """Port for reporting errors.

    log_error() is informational and must return normally.
    throw() is fatal and must raise ConfigurationError.
    """

    def log_error(self, message: str) -> None: ...

    def throw(self, message: str) -> NoReturn: ...
