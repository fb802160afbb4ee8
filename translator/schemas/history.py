"""History response schemas."""

from pydantic import BaseModel

from translator.models.translation import Translation


class HistoryResponse(BaseModel):
    """GET/DELETE /v1/history response body."""

    translations: list[Translation]
    capacity: int
