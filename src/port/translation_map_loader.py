"""Translation map loader port — outbound interface for translation tables."""

from typing import Any, Mapping, Protocol

from domain.model.translation import TranslationMap


class TranslationMapLoaderPort(Protocol):
    """Port for loading and holding the active translation map.

    A loader owns exactly one active TranslationMap. Loading never raises for
    a missing or malformed resource: implementations report the failure and
    fall back to the default language's map.
    """

    def load_library_translations(self, token: str) -> None:
        """Load the bundled translation map for a language token."""
        ...

    def set_translations_map(
        self, translations_map: TranslationMap | Mapping[str, Any],
    ) -> None:
        """Install a caller-supplied map, bypassing bundled resources."""
        ...

    def get_translations_map(self) -> TranslationMap: ...
