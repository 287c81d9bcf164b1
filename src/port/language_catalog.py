"""Language catalog port — read-only access to the language token registry."""

from typing import Protocol


class LanguageCatalogPort(Protocol):
    """Port for enumerating and checking language tokens.

    The default implementation is the static TokensCatalog in
    domain.model.language; no I/O is involved.
    """

    def get_all_language_token_keys(self) -> list[str]: ...

    def get_all_language_tokens(self) -> list[str]: ...

    def language_available(self, token: str | None) -> bool: ...
