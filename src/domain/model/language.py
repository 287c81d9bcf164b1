"""Language token registry.

Closed, process-wide set of language tokens the translator can load a bundled
translation map for, plus the sentinel token used for caller-supplied maps.
"""

from enum import Enum


class LanguageToken(str, Enum):
    """Enumeration of known language tokens."""
    ENGLISH = 'english'
    USER_DEFINED = 'user-defined'


DEFAULT_LANGUAGE = LanguageToken.ENGLISH


def token_value(token: str) -> str:
    """Plain string value of a token, whether given as str or LanguageToken."""
    return token.value if isinstance(token, LanguageToken) else str(token)


# ── Registry ──────────────────────────────────────────────────

LANGUAGE_TOKENS: frozenset[str] = frozenset(token.value for token in LanguageToken)


class TokensCatalog:
    """Static catalog over the language token registry."""

    @staticmethod
    def get_all_language_token_keys() -> list[str]:
        """Enum member names, e.g. ['ENGLISH', 'USER_DEFINED']."""
        return [token.name for token in LanguageToken]

    @staticmethod
    def get_all_language_tokens() -> list[str]:
        """Token values, e.g. ['english', 'user-defined']."""
        return [token.value for token in LanguageToken]

    @staticmethod
    def language_available(token: str | None) -> bool:
        """Return True if the token is part of the registry.

        Accepts plain strings as well as LanguageToken members, which compare
        equal to their string value.
        """
        if not isinstance(token, str):
            return False
        return token in LANGUAGE_TOKENS
