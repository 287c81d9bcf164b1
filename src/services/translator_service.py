"""Translator service — configuration, language selection and translation.

Construction resolves the config once: a custom map is installed directly
under the user-defined token, otherwise the requested token goes through
language selection, which loads its bundled map. Each translate call then
reads the active map and applies whole-word replacement followed by suffix
replacement.
"""

import logging

from adapter.locale.bundled_loader import BundledTranslationMapLoader
from adapter.reporting.logging_reporter import LoggingErrorReporter
from domain.model.language import DEFAULT_LANGUAGE, LanguageToken, TokensCatalog, token_value
from domain.model.translation import TranslatorConfig
from port.error_reporter import ErrorReporterPort
from port.language_catalog import LanguageCatalogPort
from port.translation_map_loader import TranslationMapLoaderPort
from utils.substitution import replace_suffixes, replace_whole_words

logger = logging.getLogger(__name__)

INVALID_CONFIG_MESSAGE = (
    "Invalid Config Provided. You must provide at least one of the following: "
    "\n\t`language_token` or `user_translations_map`"
)


class DoggoTranslator:
    """Translates sentences with a word/suffix substitution map.

    Example:
        translator = DoggoTranslator(TranslatorConfig(language_token="english"))
        translator.translate_sentence("Hello friend")         → "Bark fren"
        translator.translate_sentence("Bark fren", reverse=True) → "Hello friend"
    """

    DEFAULT_RESPONSE = "Bork"
    DEFAULT_LANGUAGE = DEFAULT_LANGUAGE

    def __init__(
        self,
        config: TranslatorConfig | None,
        loader: TranslationMapLoaderPort | None = None,
        catalog: LanguageCatalogPort | None = None,
        error_reporter: ErrorReporterPort | None = None,
    ):
        self.error_reporter = error_reporter or LoggingErrorReporter()
        self.loader = loader or BundledTranslationMapLoader(error_reporter=self.error_reporter)
        self.catalog = catalog or TokensCatalog()
        self._language_token: str = DEFAULT_LANGUAGE.value

        self._validate_config(config)
        self._set_up_translator(config)

    @property
    def language_token(self) -> str:
        """Currently selected language token."""
        return self._language_token

    def translate_sentence(self, source_sentence: str, reverse: bool = False) -> str:
        """Translate a sentence with the active translation map.

        Args:
            source_sentence: Sentence to translate.
            reverse: False translates source → target (e.g. english → doggo),
                True translates target → source.

        Returns:
            The translated sentence, or DEFAULT_RESPONSE for an empty sentence.
        """
        if source_sentence == "":
            return self.DEFAULT_RESPONSE

        translations_map = self.loader.get_translations_map()
        sentence = replace_whole_words(source_sentence, translations_map.words, reverse)
        if translations_map.suffixes is not None:
            sentence = replace_suffixes(sentence, translations_map.suffixes, reverse)
        return sentence

    def get_all_language_tokens(self) -> list[str]:
        """Return the available language tokens."""
        return self.catalog.get_all_language_tokens()

    def set_language(self, language_token: str) -> None:
        """Select a language and load its translation map.

        Unknown tokens are reported and the stored token falls back to the
        default language; the loader is still asked for the requested token
        and performs its own fallback.
        """
        if not self.language_available(language_token):
            self.error_reporter.log_error(
                f"The language was not found, defaulting to {self.DEFAULT_LANGUAGE.value}"
            )
            self._language_token = self.DEFAULT_LANGUAGE.value
            self.loader.load_library_translations(language_token)
            return

        self._language_token = token_value(language_token)
        self.loader.load_library_translations(language_token)

    def language_available(self, language_token: str) -> bool:
        return self.catalog.language_available(language_token)

    def _validate_config(self, config: TranslatorConfig | None) -> None:
        if config is None or not config.is_valid:
            self.error_reporter.throw(INVALID_CONFIG_MESSAGE)

    def _set_up_translator(self, config: TranslatorConfig) -> None:
        if config.user_translations_map is None:
            self.set_language(config.language_token)
            return

        self.set_language(LanguageToken.USER_DEFINED)
        self.loader.set_translations_map(config.user_translations_map)
        logger.debug("Installed user-defined translations", extra={
            "words": len(config.user_translations_map.words),
        })
