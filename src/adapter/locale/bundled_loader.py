"""Bundled JSON implementation of TranslationMapLoaderPort.

Translation maps ship as `<token>.json` files under `locales/`. A missing or
malformed file never aborts the caller: the failure is logged and the
default language's map is loaded instead. Only a missing default map goes
through the error reporter.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from adapter.reporting.logging_reporter import LoggingErrorReporter
from domain.model.errors import ValidationError
from domain.model.language import DEFAULT_LANGUAGE, LanguageToken, token_value
from domain.model.translation import EMPTY_TRANSLATION_MAP, TranslationMap
from port.error_reporter import ErrorReporterPort

logger = logging.getLogger(__name__)

BUNDLED_LOCALES_DIR = Path(__file__).parent / "locales"


def get_locales_dir() -> Path:
    """Resolve the locales directory, honouring DOGGO_LOCALES_DIR if set."""
    override = os.getenv("DOGGO_LOCALES_DIR")
    return Path(override) if override else BUNDLED_LOCALES_DIR


class BundledTranslationMapLoader:
    """Loads translation maps from JSON resources keyed by language token."""

    def __init__(
        self,
        locales_dir: Path | str | None = None,
        error_reporter: ErrorReporterPort | None = None,
    ):
        self.locales_dir = Path(locales_dir) if locales_dir else get_locales_dir()
        self.error_reporter = error_reporter or LoggingErrorReporter()
        self._translations_map: TranslationMap = EMPTY_TRANSLATION_MAP

    def load_library_translations(self, token: str) -> None:
        if token == LanguageToken.USER_DEFINED:
            # Custom maps are installed through set_translations_map()
            logger.debug("Skipping bundled load for user-defined language")
            return

        name = token_value(token)
        translations_map = self._read(name)
        if translations_map is not None:
            self._translations_map = translations_map
            logger.info("Loaded bundled translations", extra={
                "language": name,
                "words": len(translations_map.words),
                "suffixes": len(translations_map.suffixes or ()),
            })
            return

        if token == DEFAULT_LANGUAGE:
            self.error_reporter.log_error(
                f"Translations for the default language {DEFAULT_LANGUAGE.value} "
                "could not be loaded, no translations are active"
            )
            self._translations_map = EMPTY_TRANSLATION_MAP
            return

        # Callers report unknown languages themselves; only log here
        logger.warning(
            "Translations for %s could not be loaded, defaulting to %s",
            name, DEFAULT_LANGUAGE.value,
        )
        self.load_library_translations(DEFAULT_LANGUAGE)

    def set_translations_map(
        self, translations_map: TranslationMap | Mapping[str, Any],
    ) -> None:
        if not isinstance(translations_map, TranslationMap):
            translations_map = TranslationMap.from_dict(translations_map)
        self._translations_map = translations_map

    def get_translations_map(self) -> TranslationMap:
        return self._translations_map

    def _read(self, name: str) -> TranslationMap | None:
        """Read and parse `<name>.json`. Returns None on any failure."""
        # Tokens come from callers; keep them inside the locales directory
        if not name or Path(name).name != name:
            logger.warning("Rejected language token as resource name: %r", name)
            return None

        path = self.locales_dir / f"{name}.json"
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return TranslationMap.from_dict(data)
        except FileNotFoundError:
            logger.warning("Translation resource not found: %s", path)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Translation resource unreadable: %s (%s)", path, e)
        return None
