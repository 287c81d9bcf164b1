"""Language token listing endpoint."""

from fastapi import APIRouter

from api.models import LanguagesResponse
from domain.model.language import DEFAULT_LANGUAGE, TokensCatalog

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=LanguagesResponse)
async def list_languages():
    """List the language tokens the translator accepts."""
    return LanguagesResponse(
        tokens=TokensCatalog.get_all_language_tokens(),
        keys=TokensCatalog.get_all_language_token_keys(),
        default=DEFAULT_LANGUAGE.value,
    )
