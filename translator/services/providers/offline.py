"""Offline phrasebook provider. Always succeeds.

Used as the last link of the fallback chain when no remote backend
answered. Known phrases map to fixed translations; anything else gets a
bracketed placeholder naming the target language.
"""

import structlog

from translator.services.language.catalogue import language_name
from translator.services.providers.base import TranslationProvider

logger = structlog.get_logger(__name__)

_SHORT_TEXT_MAX_TOKENS = 3

# First match wins; order matters for the containment scan.
PHRASEBOOK: tuple[tuple[str, dict[str, str]], ...] = (
    (
        "hello",
        {
            "es": "hola",
            "fr": "bonjour",
            "de": "hallo",
            "it": "ciao",
            "pt": "olá",
            "ru": "привет",
            "ja": "こんにちは",
            "ko": "안녕하세요",
            "zh": "你好",
            "ar": "مرحبا",
            "hi": "नमस्ते",
            "nl": "hallo",
            "sv": "hej",
            "da": "hej",
            "no": "hei",
            "fi": "hei",
            "th": "สวัสดี",
            "vi": "xin chào",
        },
    ),
    (
        "goodbye",
        {
            "es": "adiós",
            "fr": "au revoir",
            "de": "auf wiedersehen",
            "it": "arrivederci",
            "pt": "tchau",
            "ru": "до свидания",
            "ja": "さようなら",
            "ko": "안녕히 가세요",
            "zh": "再见",
            "ar": "وداعا",
            "hi": "अलविदा",
            "nl": "tot ziens",
            "sv": "hej då",
            "da": "farvel",
            "no": "ha det",
            "fi": "näkemiin",
            "th": "ลาก่อน",
            "vi": "tạm biệt",
        },
    ),
    (
        "thank you",
        {
            "es": "gracias",
            "fr": "merci",
            "de": "danke",
            "it": "grazie",
            "pt": "obrigado",
            "ru": "спасибо",
            "ja": "ありがとう",
            "ko": "감사합니다",
            "zh": "谢谢",
            "ar": "شكرا",
            "hi": "धन्यवाद",
            "nl": "dank je",
            "sv": "tack",
            "da": "tak",
            "no": "takk",
            "fi": "kiitos",
            "th": "ขอบคุณ",
            "vi": "cảm ơn",
        },
    ),
    (
        "how are you",
        {
            "es": "¿cómo estás?",
            "fr": "comment allez-vous?",
            "de": "wie geht es dir?",
            "it": "come stai?",
            "pt": "como você está?",
            "ru": "как дела?",
            "ja": "元気ですか？",
            "ko": "어떻게 지내세요?",
            "zh": "你好吗？",
            "ar": "كيف حالك؟",
            "hi": "आप कैसे हैं?",
        },
    ),
    (
        "good morning",
        {
            "es": "buenos días",
            "fr": "bonjour",
            "de": "guten morgen",
            "it": "buongiorno",
            "pt": "bom dia",
            "ru": "доброе утро",
            "ja": "おはよう",
            "ko": "좋은 아침",
            "zh": "早上好",
            "ar": "صباح الخير",
            "hi": "सुप्रभात",
        },
    ),
)


def lookup_phrase(text: str, target_lang: str) -> str | None:
    """Exact phrase match first, then the first phrase contained in text."""
    needle = text.strip().lower()
    for phrase, translations in PHRASEBOOK:
        if phrase == needle and target_lang in translations:
            return translations[target_lang]
    for phrase, translations in PHRASEBOOK:
        if phrase in needle and target_lang in translations:
            return translations[target_lang]
    return None


def placeholder(text: str, target_lang: str) -> str:
    name = language_name(target_lang)
    if len(text.split()) <= _SHORT_TEXT_MAX_TOKENS:
        return f"[{text} in {name}]"
    return f'[{name} translation: "{text}"]'


class OfflineProvider(TranslationProvider):
    """Deterministic, network-free last resort."""

    @property
    def name(self) -> str:
        return "offline"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        translated = lookup_phrase(text, target_lang)
        if translated is not None:
            logger.debug("offline_phrase_hit", target=target_lang)
            return translated
        logger.debug("offline_placeholder", target=target_lang, text_len=len(text))
        return placeholder(text, target_lang)
