"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_translation_map_loader
from domain.model.language import DEFAULT_LANGUAGE
from port.translation_map_loader import TranslationMapLoaderPort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    loader: TranslationMapLoaderPort = Depends(get_translation_map_loader),
):
    """Health check endpoint; verifies the default translations load."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    loader.load_library_translations(DEFAULT_LANGUAGE)
    translations_map = loader.get_translations_map()
    if translations_map.is_empty:
        health_status["services"]["translations"] = {
            "status": "unhealthy",
            "message": f"No translations loaded for {DEFAULT_LANGUAGE.value}"
        }
        health_status["status"] = "degraded"
        logger.warning("Default translations unavailable")
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        health_status["services"]["translations"] = {
            "status": "healthy",
            "message": f"{len(translations_map.words)} words loaded for {DEFAULT_LANGUAGE.value}"
        }
        status_code = status.HTTP_200_OK

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
