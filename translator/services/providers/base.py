"""Abstract translation provider interface.

Every backend (remote API or offline table) implements this class so the
orchestrator's fallback loop never needs to know which backend it is
talking to. A provider either returns translated text or raises
ProviderError.
"""

from abc import ABC, abstractmethod


class TranslationProvider(ABC):
    """Abstract base class for translation providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs and diagnostics."""
        ...

    @abstractmethod
    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        """Translate text.

        Args:
            text: Text to translate (already checked to be non-blank).
            source_lang: Source language code, or "auto" to let the backend detect.
            target_lang: Target language code.

        Returns:
            The translated text.

        Raises:
            ProviderError: On transport failure, non-success status, or a
                malformed response.
        """
        ...
