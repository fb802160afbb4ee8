"""Shared FastAPI dependencies.

The orchestrator, detector and history store are created once during the
FastAPI lifespan and stored on app.state. Route handlers retrieve them via
Depends() and never by direct import, so tests can override them.
"""

from fastapi import Request

from translator.services.history.store import HistoryStore
from translator.services.language.detector import LanguageDetector
from translator.services.orchestrator import TranslationOrchestrator


def get_orchestrator(request: Request) -> TranslationOrchestrator:
    """Return the singleton orchestrator from app state."""
    return request.app.state.orchestrator


def get_detector(request: Request) -> LanguageDetector:
    return request.app.state.detector


def get_history_store(request: Request) -> HistoryStore:
    """Return the singleton history store from app state."""
    return request.app.state.history_store
