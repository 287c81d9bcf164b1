"""In-memory implementation of TranslationMapLoaderPort for testing."""

from typing import Any, Mapping

from domain.model.language import DEFAULT_LANGUAGE, token_value
from domain.model.translation import EMPTY_TRANSLATION_MAP, TranslationMap


class FakeTranslationMapLoader:
    """Fake loader serving preconfigured maps keyed by language token.

    Tokens without a configured map fall back to the default language's map,
    or to the empty map when that is missing too.
    """

    def __init__(self, maps: dict[str, TranslationMap | Mapping[str, Any]] | None = None):
        self.maps: dict[str, TranslationMap] = {
            token_value(token): (
                m if isinstance(m, TranslationMap) else TranslationMap.from_dict(m)
            )
            for token, m in (maps or {}).items()
        }
        self.loaded_tokens: list[str] = []
        self.installed_maps: list[TranslationMap] = []
        self._active: TranslationMap = EMPTY_TRANSLATION_MAP

    def load_library_translations(self, token: str) -> None:
        name = token_value(token)
        self.loaded_tokens.append(name)
        self._active = self.maps.get(
            name, self.maps.get(DEFAULT_LANGUAGE.value, EMPTY_TRANSLATION_MAP)
        )

    def set_translations_map(
        self, translations_map: TranslationMap | Mapping[str, Any],
    ) -> None:
        if not isinstance(translations_map, TranslationMap):
            translations_map = TranslationMap.from_dict(translations_map)
        self.installed_maps.append(translations_map)
        self._active = translations_map

    def get_translations_map(self) -> TranslationMap:
        return self._active
