"""Unit tests for TranslationOrchestrator.

Tests:
  - empty/blank input raises EmptyInputError
  - same concrete language returns input with zero provider calls
  - providers tried strictly in order; first success wins
  - echo from the primary falls through to the secondary
  - all remotes failing yields the offline result ("hello" -> "hola")
  - slow providers are cut off by the attempt deadline
  - "auto" source is detected for the outcome but sent as "auto"
"""

from __future__ import annotations

import pytest

from translator.core.exceptions import EmptyInputError, NoOpResultError
from translator.services.language.detector import LanguageDetector
from translator.services.orchestrator import PASSTHROUGH, TranslationOrchestrator
from translator.services.providers.offline import OfflineProvider
from tests.conftest import StubProvider, failing_provider


def _orchestrator(*providers: StubProvider, timeout: float = 1.0) -> TranslationOrchestrator:
    return TranslationOrchestrator(
        providers=list(providers),
        fallback=OfflineProvider(),
        detector=LanguageDetector(),
        attempt_timeout=timeout,
    )


@pytest.mark.asyncio
class TestPreconditions:
    async def test_empty_text_raises(
        self, orchestrator: TranslationOrchestrator, primary: StubProvider
    ) -> None:
        with pytest.raises(EmptyInputError):
            await orchestrator.translate("", "en", "es")
        assert primary.calls == []

    async def test_blank_text_raises(self, orchestrator: TranslationOrchestrator) -> None:
        with pytest.raises(EmptyInputError):
            await orchestrator.translate("   \n\t", "auto", "es")

    async def test_same_language_passthrough(
        self,
        orchestrator: TranslationOrchestrator,
        primary: StubProvider,
        secondary: StubProvider,
    ) -> None:
        outcome = await orchestrator.run("Bonjour", "fr", "fr")
        assert outcome.text == "Bonjour"
        assert outcome.provider == PASSTHROUGH
        assert primary.calls == []
        assert secondary.calls == []

    async def test_auto_source_is_not_passthrough(
        self, orchestrator: TranslationOrchestrator, primary: StubProvider
    ) -> None:
        await orchestrator.translate("hello", "auto", "en")
        assert len(primary.calls) == 1


@pytest.mark.asyncio
class TestFallbackChain:
    async def test_primary_success_stops_chain(
        self,
        orchestrator: TranslationOrchestrator,
        primary: StubProvider,
        secondary: StubProvider,
    ) -> None:
        outcome = await orchestrator.run("hello", "en", "es")
        assert outcome.text == "primary result"
        assert outcome.provider == "primary"
        assert outcome.attempts == []
        assert secondary.calls == []

    async def test_primary_failure_uses_secondary(self) -> None:
        primary = failing_provider("primary")
        secondary = StubProvider(name="secondary", result="hola")
        outcome = await _orchestrator(primary, secondary).run("hello", "en", "es")

        assert outcome.text == "hola"
        assert outcome.provider == "secondary"
        assert [a.provider for a in outcome.attempts] == ["primary"]
        assert outcome.attempts[0].error == "service unavailable"

    async def test_primary_echo_falls_through_to_secondary(self) -> None:
        primary = StubProvider(name="primary", error=NoOpResultError("primary"))
        secondary = StubProvider(name="secondary", result="hola")
        result = await _orchestrator(primary, secondary).translate("hello", "en", "es")

        assert result == "hola"
        assert len(primary.calls) == 1
        assert len(secondary.calls) == 1

    async def test_all_remote_failures_use_offline_table(self) -> None:
        primary = failing_provider("primary")
        secondary = failing_provider("secondary")
        outcome = await _orchestrator(primary, secondary).run("hello", "en", "es")

        assert outcome.text == "hola"
        assert outcome.provider == "offline"
        assert [a.provider for a in outcome.attempts] == ["primary", "secondary"]

    async def test_offline_placeholder_when_unmapped(self) -> None:
        result = await _orchestrator(
            failing_provider("primary"), failing_provider("secondary")
        ).translate("random unseen phrase of words", "en", "fr")
        assert result == '[French translation: "random unseen phrase of words"]'

    async def test_unexpected_exception_is_absorbed(self) -> None:
        primary = StubProvider(name="primary", error=KeyError("responseData"))
        secondary = StubProvider(name="secondary", result="hola")
        outcome = await _orchestrator(primary, secondary).run("hello", "en", "es")
        assert outcome.provider == "secondary"
        assert len(outcome.attempts) == 1

    async def test_no_retry_within_provider(self) -> None:
        primary = failing_provider("primary")
        await _orchestrator(primary).translate("hello", "en", "es")
        assert len(primary.calls) == 1

    async def test_slow_provider_times_out(self) -> None:
        slow = StubProvider(name="slow", result="late", delay=5.0)
        fast = StubProvider(name="fast", result="hola")
        outcome = await _orchestrator(slow, fast, timeout=0.05).run("hello", "en", "es")

        assert outcome.text == "hola"
        assert "timed out" in outcome.attempts[0].error

    async def test_totality_without_remote_providers(self) -> None:
        result = await _orchestrator().translate("some text", "en", "de")
        assert result == "[some text in German]"

    async def test_chain_order(self, orchestrator: TranslationOrchestrator) -> None:
        assert orchestrator.chain == ["primary", "secondary", "offline"]


@pytest.mark.asyncio
class TestAutoSource:
    async def test_detected_language_reported(
        self, orchestrator: TranslationOrchestrator, primary: StubProvider
    ) -> None:
        outcome = await orchestrator.run("Привет", "auto", "en")
        assert outcome.source_language == "ru"
        assert primary.calls[0]["source_lang"] == "auto"

    async def test_explicit_source_is_kept(
        self, orchestrator: TranslationOrchestrator
    ) -> None:
        outcome = await orchestrator.run("Привет", "uk", "en")
        assert outcome.source_language == "uk"
