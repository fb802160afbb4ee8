"""Translation endpoint."""

import structlog
from fastapi import APIRouter, Depends

from translator.api.deps import get_history_store, get_orchestrator
from translator.models.translation import Translation
from translator.schemas.translate import TranslateRequest, TranslateResponse
from translator.services.history.store import HistoryStore
from translator.services.orchestrator import TranslationOrchestrator

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["translate"])


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    body: TranslateRequest,
    orchestrator: TranslationOrchestrator = Depends(get_orchestrator),
    history: HistoryStore = Depends(get_history_store),
) -> TranslateResponse:
    """Translate text and record the result in history.

    Blank text is rejected with EMPTY_INPUT. Provider failures never
    surface here: the orchestrator always falls back to a result.
    """
    outcome = await orchestrator.run(
        body.text, body.source_language, body.target_language
    )
    if outcome.attempts:
        logger.info(
            "translate_used_fallback",
            provider=outcome.provider,
            failures=[f"{a.provider}: {a.error}" for a in outcome.attempts],
        )

    entry = Translation.create(
        source_text=body.text,
        translated_text=outcome.text,
        source_language=outcome.source_language,
        target_language=outcome.target_language,
    )
    await history.append(entry)

    return TranslateResponse(translation=entry, provider=outcome.provider)
