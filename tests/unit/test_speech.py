"""Unit tests for the speech collaborator boundary."""

from __future__ import annotations

from translator.services.speech import (
    SpeechEngine,
    SpeechService,
    Utterance,
    Voice,
    select_voice,
)


class FakeEngine(SpeechEngine):
    def __init__(self, voices: list[Voice], available: bool = True) -> None:
        self._voices = voices
        self._available = available
        self.spoken: list[Utterance] = []
        self.cancel_count = 0

    def voices(self) -> list[Voice]:
        return self._voices

    def speak(self, utterance: Utterance) -> None:
        self.spoken.append(utterance)

    def cancel(self) -> None:
        self.cancel_count += 1

    def is_available(self) -> bool:
        return self._available


_VOICES = [
    Voice("Samantha", "en-US"),
    Voice("Daniel", "en-GB"),
    Voice("Monica", "es-ES"),
]


class TestSpeechService:
    def test_first_matching_voice(self) -> None:
        engine = FakeEngine(_VOICES)
        utterance = SpeechService(engine).speak("hello", "en")
        assert utterance is not None
        assert utterance.voice == Voice("Samantha", "en-US")
        assert (utterance.rate, utterance.pitch, utterance.volume) == (0.9, 1.0, 1.0)

    def test_cancels_before_speaking(self) -> None:
        engine = FakeEngine(_VOICES)
        service = SpeechService(engine)
        service.speak("hola", "es")
        service.speak("adiós", "ES")
        assert engine.cancel_count == 2
        assert [u.voice.name for u in engine.spoken] == ["Monica", "Monica"]

    def test_no_voice_match_uses_default(self) -> None:
        engine = FakeEngine(_VOICES)
        utterance = SpeechService(engine).speak("bonjour", "fr")
        assert utterance is not None and utterance.voice is None

    def test_blank_text_is_ignored(self) -> None:
        engine = FakeEngine(_VOICES)
        assert SpeechService(engine).speak("   ", "en") is None
        assert engine.spoken == []
        assert engine.cancel_count == 0

    def test_stop_and_support(self) -> None:
        engine = FakeEngine([], available=False)
        service = SpeechService(engine)
        service.stop()
        assert engine.cancel_count == 1
        assert service.is_supported() is False

    def test_select_voice_case_insensitive(self) -> None:
        assert select_voice([Voice("x", "PT-br")], "pt") == Voice("x", "PT-br")
