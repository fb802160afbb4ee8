"""Heuristic source-language detection.

Matchers are tried in order and the first hit wins. The English matcher
only accepts plain ASCII text, so it never shadows the diacritic and
script matchers after it.
"""

import re
from typing import Callable

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_LANGUAGE = "en"

Matcher = Callable[[str], bool]


def _consists_of(pattern: str) -> Matcher:
    compiled = re.compile(pattern)
    return lambda text: compiled.fullmatch(text) is not None


def _contains(pattern: str, flags: int = 0) -> Matcher:
    compiled = re.compile(pattern, flags)
    return lambda text: compiled.search(text) is not None


_MATCHERS: tuple[tuple[str, Matcher], ...] = (
    ("en", _consists_of(r"[a-zA-Z\s.,!?'\"0-9\-()]+")),
    ("es", _contains(r"[ñáéíóúü¿¡]", re.IGNORECASE)),
    ("fr", _contains(r"[àâäéèêëïîôöùûüÿç]", re.IGNORECASE)),
    ("de", _contains(r"[äöüß]", re.IGNORECASE)),
    ("ru", _contains(r"[а-яё]", re.IGNORECASE)),
    ("zh", _contains(r"[\u4e00-\u9fff]")),
    ("ja", _contains(r"[\u3040-\u309f\u30a0-\u30ff]")),
    ("ar", _contains(r"[\u0600-\u06ff]")),
    ("hi", _contains(r"[\u0900-\u097f]")),
    ("ko", _contains(r"[\uac00-\ud7af]")),
    ("th", _contains(r"[\u0e00-\u0e7f]")),
    (
        "vi",
        _contains(
            r"[àáạảãâầấậẩẫăằắặẳẵèéẹẻẽêềếệểễìíịỉĩòóọỏõôồốộổỗơờớợởỡùúụủũưừứựửữỳýỵỷỹđ]",
            re.IGNORECASE,
        ),
    ),
)


class LanguageDetector:
    """Stateless classifier mapping raw text to a language code."""

    def detect(self, text: str) -> str:
        for code, matches in _MATCHERS:
            if matches(text):
                logger.debug("language_detected", language=code, text_len=len(text))
                return code
        logger.debug("language_defaulted", language=DEFAULT_LANGUAGE, text_len=len(text))
        return DEFAULT_LANGUAGE
