"""Language catalogue and detection endpoints."""

from fastapi import APIRouter, Depends

from translator.api.deps import get_detector
from translator.core.exceptions import SwapNotAllowedError
from translator.models.translation import AUTO_LANGUAGE
from translator.schemas.translate import (
    DetectRequest,
    DetectResponse,
    LanguageListResponse,
    LanguageOut,
    SwapRequest,
    SwapResponse,
)
from translator.services.language.catalogue import list_languages
from translator.services.language.detector import LanguageDetector

router = APIRouter(tags=["languages"])


@router.get("/languages", response_model=LanguageListResponse)
async def get_languages(exclude_auto: bool = False) -> LanguageListResponse:
    """List supported languages in display order."""
    return LanguageListResponse(
        languages=[
            LanguageOut.model_validate(lang)
            for lang in list_languages(exclude_auto=exclude_auto)
        ]
    )


@router.post("/languages/swap", response_model=SwapResponse)
async def swap_languages(body: SwapRequest) -> SwapResponse:
    """Swap source/target languages along with their texts."""
    if body.source_language == AUTO_LANGUAGE:
        raise SwapNotAllowedError()
    return SwapResponse(
        source_language=body.target_language,
        target_language=body.source_language,
        source_text=body.translated_text,
        translated_text=body.source_text,
    )


@router.post("/detect", response_model=DetectResponse)
async def detect_language(
    body: DetectRequest,
    detector: LanguageDetector = Depends(get_detector),
) -> DetectResponse:
    return DetectResponse(language=detector.detect(body.text))
