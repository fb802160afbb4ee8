"""Translation request/response schemas."""

from pydantic import BaseModel, ConfigDict, field_validator

from translator.models.translation import AUTO_LANGUAGE, Translation


class TranslateRequest(BaseModel):
    """POST /v1/translate request body."""

    text: str
    source_language: str = AUTO_LANGUAGE
    target_language: str = "en"

    @field_validator("target_language")
    @classmethod
    def _target_not_auto(cls, value: str) -> str:
        if value == AUTO_LANGUAGE:
            raise ValueError("target_language cannot be 'auto'")
        return value


class TranslateResponse(BaseModel):
    """POST /v1/translate response body."""

    translation: Translation
    provider: str


class DetectRequest(BaseModel):
    """POST /v1/detect request body."""

    text: str


class DetectResponse(BaseModel):
    language: str


class LanguageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    flag: str


class LanguageListResponse(BaseModel):
    """GET /v1/languages response body."""

    languages: list[LanguageOut]


class SwapRequest(BaseModel):
    """POST /v1/languages/swap request body."""

    source_language: str
    target_language: str
    source_text: str = ""
    translated_text: str = ""


class SwapResponse(BaseModel):
    source_language: str
    target_language: str
    source_text: str
    translated_text: str
