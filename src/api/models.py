"""Pydantic models for API request/response."""

from typing import Optional

from pydantic import BaseModel, Field

from domain.model.translation import TranslationMap


class TranslationMapModel(BaseModel):
    """Inline translation map supplied by the caller."""
    words: dict[str, str] = Field(default_factory=dict, description="Whole-word pairs, source → target")
    suffixes: Optional[dict[str, str]] = Field(None, description="Suffix pairs, source → target")

    def to_domain(self) -> TranslationMap:
        return TranslationMap(words=self.words, suffixes=self.suffixes)


class TranslateRequest(BaseModel):
    """Request model for sentence translation."""
    sentence: str = Field(..., max_length=10000, description="Sentence to translate")
    reverse: bool = Field(False, description="Translate target → source instead")
    language_token: Optional[str] = Field(None, max_length=50, description="Bundled language token")
    user_translations_map: Optional[TranslationMapModel] = Field(
        None, description="Custom map; takes priority over language_token"
    )


class TranslateResponse(BaseModel):
    """Response model for sentence translation."""
    translation: str
    language_token: str = Field(..., description="Language actually selected")
    reverse: bool


class LanguagesResponse(BaseModel):
    """Response model for the language token listing."""
    tokens: list[str]
    keys: list[str]
    default: str
