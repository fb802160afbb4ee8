"""Translation record and the bounded history aggregate.

The aggregate is persisted whole as ``{"translations": [...]}`` with
camelCase field names.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

AUTO_LANGUAGE = "auto"


class Translation(BaseModel):
    """A single accepted translation. Never mutated after creation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    source_text: str
    translated_text: str
    source_language: str
    target_language: str
    timestamp: datetime

    @classmethod
    def create(
        cls,
        source_text: str,
        translated_text: str,
        source_language: str,
        target_language: str,
    ) -> Translation:
        """Build a new record with a fresh id and the current UTC time."""
        if source_language == AUTO_LANGUAGE:
            raise ValueError("source_language must be resolved before persisting")
        return cls(
            id=uuid.uuid4().hex,
            source_text=source_text,
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_language,
            timestamp=datetime.now(timezone.utc),
        )


class TranslationHistory(BaseModel):
    """Newest-first log of accepted translations."""

    model_config = ConfigDict(populate_by_name=True)

    translations: list[Translation] = Field(default_factory=list)
