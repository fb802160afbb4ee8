"""Text-to-speech collaborator boundary.

Audio output is platform specific and lives outside this service; an
engine implementing SpeechEngine is injected by whoever hosts playback.
SpeechService only owns voice selection and the fixed utterance defaults.
Nothing inside this package drives it: it is a public extension point for
hosts that add audio playback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_RATE = 0.9
DEFAULT_PITCH = 1.0
DEFAULT_VOLUME = 1.0


@dataclass(frozen=True)
class Voice:
    name: str
    locale: str


@dataclass(frozen=True)
class Utterance:
    text: str
    voice: Voice | None = None
    rate: float = DEFAULT_RATE
    pitch: float = DEFAULT_PITCH
    volume: float = DEFAULT_VOLUME


class SpeechEngine(ABC):
    """Platform speech synthesizer."""

    @abstractmethod
    def voices(self) -> list[Voice]:
        ...

    @abstractmethod
    def speak(self, utterance: Utterance) -> None:
        ...

    @abstractmethod
    def cancel(self) -> None:
        ...

    @abstractmethod
    def is_available(self) -> bool:
        ...


def select_voice(voices: list[Voice], language_code: str) -> Voice | None:
    """First voice whose locale starts with the language code."""
    prefix = language_code.lower()
    for voice in voices:
        if voice.locale.lower().startswith(prefix):
            return voice
    return None


class SpeechService:
    def __init__(self, engine: SpeechEngine) -> None:
        self._engine = engine

    def speak(self, text: str, language_code: str) -> Utterance | None:
        if not text.strip():
            return None

        self._engine.cancel()
        voice = select_voice(self._engine.voices(), language_code)
        if voice is None:
            logger.debug("speech_voice_not_found", language=language_code)
        utterance = Utterance(text=text, voice=voice)
        self._engine.speak(utterance)
        return utterance

    def stop(self) -> None:
        self._engine.cancel()

    def is_supported(self) -> bool:
        return self._engine.is_available()
