"""Translation map and translator configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from domain.model.errors import ValidationError

# Ordered (source, target) pairs; order is the replacement priority.
Pairs = tuple[tuple[str, str], ...]


def _to_pairs(table: Any, table_name: str) -> Pairs:
    """Convert a {source: target} mapping into ordered pairs, validating types."""
    if not isinstance(table, Mapping):
        raise ValidationError(
            f"`{table_name}` must be a mapping of strings, got {type(table).__name__}"
        )
    pairs = []
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValidationError(
                f"`{table_name}` entries must map strings to strings, got {key!r}: {value!r}"
            )
        pairs.append((key, value))
    return tuple(pairs)


@dataclass(frozen=True)
class TranslationMap:
    """Whole-word and suffix substitution tables for one language.

    `suffixes` is None when the language has no suffix table, which is
    different from an empty table only in `to_dict` output.
    """

    words: Pairs = ()
    suffixes: Pairs | None = None

    def __post_init__(self) -> None:
        # Accept plain dicts at construction time and freeze them into pairs
        if isinstance(self.words, Mapping):
            object.__setattr__(self, "words", _to_pairs(self.words, "words"))
        if isinstance(self.suffixes, Mapping):
            object.__setattr__(self, "suffixes", _to_pairs(self.suffixes, "suffixes"))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TranslationMap:
        """Build a TranslationMap from `{"words": {...}, "suffixes": {...}}`.

        Both tables are optional. Raises ValidationError on malformed data.
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Translation map must be a mapping, got {type(data).__name__}"
            )
        raw_words = data.get("words")
        words = _to_pairs(raw_words, "words") if raw_words is not None else ()
        raw_suffixes = data.get("suffixes")
        suffixes = _to_pairs(raw_suffixes, "suffixes") if raw_suffixes is not None else None
        return cls(words=words, suffixes=suffixes)

    def to_dict(self) -> dict[str, dict[str, str]]:
        result = {"words": dict(self.words)}
        if self.suffixes is not None:
            result["suffixes"] = dict(self.suffixes)
        return result

    @property
    def is_empty(self) -> bool:
        return not self.words and not self.suffixes


EMPTY_TRANSLATION_MAP = TranslationMap()


@dataclass(frozen=True)
class TranslatorConfig:
    """Construction input for the translator.

    At least one of `language_token` or `user_translations_map` must be set;
    when both are, the custom map wins.
    """

    language_token: str | None = None
    user_translations_map: TranslationMap | None = None

    def __post_init__(self) -> None:
        if isinstance(self.user_translations_map, Mapping):
            object.__setattr__(
                self,
                "user_translations_map",
                TranslationMap.from_dict(self.user_translations_map),
            )

    @property
    def is_valid(self) -> bool:
        return bool(self.language_token) or self.user_translations_map is not None
