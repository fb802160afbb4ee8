"""Shared pytest fixtures for the translator test suite.

Provides:
  - StubProvider: scriptable TranslationProvider with call tracking
  - MockRedisClient: in-memory stand-in for RedisClient
  - FailingRedisClient: every call raises PersistenceError
  - history_store / orchestrator fixtures wired from the above

All remote backends are faked; no test touches the network or Redis.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from translator.core.exceptions import PersistenceError, ProviderError
from translator.models.translation import Translation
from translator.services.history.repository import HistoryRepository
from translator.services.history.store import HistoryStore
from translator.services.language.detector import LanguageDetector
from translator.services.orchestrator import TranslationOrchestrator
from translator.services.providers.base import TranslationProvider
from translator.services.providers.offline import OfflineProvider


# ---------------------------------------------------------------------------
# Stub provider
# ---------------------------------------------------------------------------


class StubProvider(TranslationProvider):
    """Returns a fixed result, echoes, fails, or hangs, and records calls."""

    def __init__(
        self,
        name: str = "stub",
        result: str | None = "translated",
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self._name = name
        self._result = result
        self._error = error
        self._delay = delay
        self.calls: list[dict[str, str]] = []

    @property
    def name(self) -> str:
        return self._name

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append(
            {"text": text, "source_lang": source_lang, "target_lang": target_lang}
        )
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return text if self._result is None else self._result


def failing_provider(name: str, reason: str = "service unavailable") -> StubProvider:
    return StubProvider(name=name, error=ProviderError(name, reason))


# ---------------------------------------------------------------------------
# Mock Redis clients
# ---------------------------------------------------------------------------


class MockRedisClient:
    """In-memory mock of RedisClient for testing."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self.set_calls = 0

    async def get(self, key: str) -> str | None:
        return self._store.get(key)

    async def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        self._store[key] = value

    async def delete(self, key: str) -> int:
        if key in self._store:
            del self._store[key]
            return 1
        return 0

    async def set_json(self, key: str, value: Any) -> None:
        await self.set(key, json.dumps(value, ensure_ascii=False))


class FailingRedisClient(MockRedisClient):
    """Simulates an unreachable or full store."""

    async def get(self, key: str) -> str | None:
        raise PersistenceError("Redis GET failed: connection refused")

    async def set(self, key: str, value: str) -> None:
        raise PersistenceError("Redis SET failed: OOM command not allowed")

    async def delete(self, key: str) -> int:
        raise PersistenceError("Redis DELETE failed: connection refused")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_translation(n: int, **overrides: Any) -> Translation:
    """Deterministic Translation with id ``t<n>``."""
    fields: dict[str, Any] = {
        "source_text": f"text {n}",
        "translated_text": f"texto {n}",
        "source_language": "en",
        "target_language": "es",
    }
    fields.update(overrides)
    entry = Translation.create(**fields)
    return entry.model_copy(update={"id": f"t{n}"})


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_redis() -> MockRedisClient:
    return MockRedisClient()


@pytest.fixture
def history_repository(mock_redis: MockRedisClient) -> HistoryRepository:
    return HistoryRepository(mock_redis, key="test_history")


@pytest.fixture
def history_store(history_repository: HistoryRepository) -> HistoryStore:
    return HistoryStore(history_repository, capacity=50)


@pytest.fixture
def detector() -> LanguageDetector:
    return LanguageDetector()


@pytest.fixture
def primary() -> StubProvider:
    return StubProvider(name="primary", result="primary result")


@pytest.fixture
def secondary() -> StubProvider:
    return StubProvider(name="secondary", result="secondary result")


@pytest.fixture
def orchestrator(
    primary: StubProvider,
    secondary: StubProvider,
    detector: LanguageDetector,
) -> TranslationOrchestrator:
    return TranslationOrchestrator(
        providers=[primary, secondary],
        fallback=OfflineProvider(),
        detector=detector,
        attempt_timeout=1.0,
    )
