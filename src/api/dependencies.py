from fastapi import Depends

from adapter.locale.bundled_loader import BundledTranslationMapLoader
from adapter.reporting.logging_reporter import LoggingErrorReporter
from port.error_reporter import ErrorReporterPort
from port.translation_map_loader import TranslationMapLoaderPort


def get_error_reporter() -> ErrorReporterPort:
    return LoggingErrorReporter()


def get_translation_map_loader(
    error_reporter: ErrorReporterPort = Depends(get_error_reporter),
) -> TranslationMapLoaderPort:
    # One loader per request; each translator owns its active map
    return BundledTranslationMapLoader(error_reporter=error_reporter)
