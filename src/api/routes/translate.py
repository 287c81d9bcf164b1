"""Translation routes.

Endpoints:
- POST /translate: Translate a sentence with a bundled or inline translation map
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_error_reporter, get_translation_map_loader
from api.models import TranslateRequest, TranslateResponse
from domain.model.errors import ConfigurationError
from domain.model.translation import TranslatorConfig
from port.error_reporter import ErrorReporterPort
from port.translation_map_loader import TranslationMapLoaderPort
from services.translator_service import DoggoTranslator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translate", tags=["translate"])


@router.post("", response_model=TranslateResponse)
async def translate(
    request: TranslateRequest,
    loader: TranslationMapLoaderPort = Depends(get_translation_map_loader),
    error_reporter: ErrorReporterPort = Depends(get_error_reporter),
):
    """Translate a sentence.

    Either `language_token` or `user_translations_map` must be given;
    the inline map wins when both are. Unknown tokens fall back to the
    default language instead of failing.
    """
    user_map = request.user_translations_map.to_domain() if request.user_translations_map else None
    config = TranslatorConfig(
        language_token=request.language_token,
        user_translations_map=user_map,
    )

    try:
        translator = DoggoTranslator(config, loader=loader, error_reporter=error_reporter)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    translation = translator.translate_sentence(request.sentence, reverse=request.reverse)
    logger.info("Sentence translated", extra={
        "language": translator.language_token,
        "reverse": request.reverse,
        "length": len(request.sentence),
    })

    return TranslateResponse(
        translation=translation,
        language_token=translator.language_token,
        reverse=request.reverse,
    )
