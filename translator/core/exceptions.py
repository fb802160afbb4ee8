"""Custom exception classes for structured error handling."""

from typing import Any


class TranslatorError(Exception):
    """Base exception for all translator errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class EmptyInputError(TranslatorError):
    def __init__(self, message: str = "Please enter text to translate") -> None:
        super().__init__(code="EMPTY_INPUT", message=message, status_code=400)


class ProviderError(TranslatorError):
    """A translation backend failed. Absorbed by the fallback chain."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(
            code="PROVIDER_FAILED",
            message=f"{provider}: {reason}",
            status_code=502,
        )


class NoOpResultError(ProviderError):
    """The backend echoed the input back instead of translating it."""

    def __init__(self, provider: str) -> None:
        super().__init__(provider, "translation returned the input text unchanged")
        self.code = "NO_OP_RESULT"


class PersistenceError(TranslatorError):
    def __init__(self, message: str = "History storage unavailable") -> None:
        super().__init__(code="PERSISTENCE_ERROR", message=message, status_code=503)


class SwapNotAllowedError(TranslatorError):
    def __init__(
        self, message: str = "Cannot swap when auto-detect is selected"
    ) -> None:
        super().__init__(code="SWAP_NOT_ALLOWED", message=message, status_code=400)
