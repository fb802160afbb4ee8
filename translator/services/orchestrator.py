"""Translation orchestrator: tries providers in order, falls back offline.

Remote providers are attempted one at a time in priority order, each
bounded by a deadline. The first provider to return a result wins. When
every remote provider fails, the offline provider answers, so translate()
always returns a string for non-blank input.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Sequence

import structlog

from translator.core.exceptions import EmptyInputError, ProviderError
from translator.models.translation import AUTO_LANGUAGE
from translator.services.language.detector import LanguageDetector
from translator.services.providers.base import TranslationProvider

logger = structlog.get_logger(__name__)

PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class ProviderAttempt:
    """A failed provider attempt, kept for diagnostics only."""

    provider: str
    error: str


@dataclass(frozen=True)
class TranslationOutcome:
    text: str
    provider: str
    source_language: str
    target_language: str
    attempts: list[ProviderAttempt] = field(default_factory=list)


class TranslationOrchestrator:
    """Drives the fixed fallback chain.

    Providers are never consulted concurrently: a later provider is only
    tried once the previous one has failed or run out of time.
    """

    def __init__(
        self,
        providers: Sequence[TranslationProvider],
        fallback: TranslationProvider,
        detector: LanguageDetector,
        attempt_timeout: float | None = 8.0,
    ) -> None:
        self._providers = list(providers)
        self._fallback = fallback
        self._detector = detector
        self._attempt_timeout = attempt_timeout
        logger.info(
            "orchestrator_initialized",
            chain=[p.name for p in self._providers] + [fallback.name],
            attempt_timeout=attempt_timeout,
        )

    @property
    def chain(self) -> list[str]:
        return [p.name for p in self._providers] + [self._fallback.name]

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        outcome = await self.run(text, source_lang, target_lang)
        return outcome.text

    async def run(
        self, text: str, source_lang: str, target_lang: str
    ) -> TranslationOutcome:
        """Translate text and report which provider produced the result.

        Raises:
            EmptyInputError: If text is blank.
        """
        if not text.strip():
            raise EmptyInputError()

        if source_lang == target_lang and source_lang != AUTO_LANGUAGE:
            return TranslationOutcome(
                text=text,
                provider=PASSTHROUGH,
                source_language=source_lang,
                target_language=target_lang,
            )

        resolved_source = source_lang
        if source_lang == AUTO_LANGUAGE:
            resolved_source = self._detector.detect(text)

        attempts: list[ProviderAttempt] = []
        for provider in self._providers:
            try:
                translated = await self._attempt(provider, text, source_lang, target_lang)
            except ProviderError as e:
                attempts.append(ProviderAttempt(provider.name, e.reason))
                logger.warning(
                    "provider_attempt_failed",
                    provider=provider.name,
                    error=e.reason,
                )
                continue
            except Exception as e:
                attempts.append(ProviderAttempt(provider.name, str(e)))
                logger.warning(
                    "provider_attempt_crashed",
                    provider=provider.name,
                    error=str(e),
                )
                continue

            logger.info(
                "translation_succeeded",
                provider=provider.name,
                source=resolved_source,
                target=target_lang,
                failed_attempts=len(attempts),
            )
            return TranslationOutcome(
                text=translated,
                provider=provider.name,
                source_language=resolved_source,
                target_language=target_lang,
                attempts=attempts,
            )

        translated = await self._fallback.translate(text, source_lang, target_lang)
        logger.info(
            "translation_fell_back",
            provider=self._fallback.name,
            target=target_lang,
            failed_attempts=len(attempts),
        )
        return TranslationOutcome(
            text=translated,
            provider=self._fallback.name,
            source_language=resolved_source,
            target_language=target_lang,
            attempts=attempts,
        )

    async def _attempt(
        self,
        provider: TranslationProvider,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str:
        try:
            return await asyncio.wait_for(
                provider.translate(text, source_lang, target_lang),
                timeout=self._attempt_timeout,
            )
        except asyncio.TimeoutError as e:
            raise ProviderError(
                provider.name, f"timed out after {self._attempt_timeout}s"
            ) from e
