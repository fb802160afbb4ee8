"""Translation history endpoints."""

from fastapi import APIRouter, Depends

from translator.api.deps import get_history_store
from translator.schemas.history import HistoryResponse
from translator.services.history.store import HistoryStore

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=HistoryResponse)
async def get_history(
    history: HistoryStore = Depends(get_history_store),
) -> HistoryResponse:
    """Most recent translations first."""
    return HistoryResponse(
        translations=await history.list(), capacity=history.capacity
    )


@router.delete("/{translation_id}", response_model=HistoryResponse)
async def delete_translation(
    translation_id: str,
    history: HistoryStore = Depends(get_history_store),
) -> HistoryResponse:
    """Remove one entry. Unknown ids leave the history unchanged."""
    return HistoryResponse(
        translations=await history.remove(translation_id),
        capacity=history.capacity,
    )


@router.delete("", response_model=HistoryResponse)
async def clear_history(
    history: HistoryStore = Depends(get_history_store),
) -> HistoryResponse:
    return HistoryResponse(translations=await history.clear(), capacity=history.capacity)
