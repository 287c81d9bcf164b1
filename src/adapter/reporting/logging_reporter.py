"""Logging implementation of ErrorReporterPort."""

import logging
from typing import NoReturn

from domain.model.errors import ConfigurationError

logger = logging.getLogger(__name__)


class LoggingErrorReporter:
    """Reports recoverable errors as warnings and raises on fatal ones."""

    def log_error(self, message: str) -> None:
        logger.warning(message)

    def throw(self, message: str) -> NoReturn:
        logger.error(message)
        raise ConfigurationError(message)
