"""Static language reference data used for lookup and display."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Language:
    code: str
    name: str
    flag: str


LANGUAGES: tuple[Language, ...] = (
    Language("auto", "Detect Language", "🌐"),
    Language("en", "English", "🇺🇸"),
    Language("es", "Spanish", "🇪🇸"),
    Language("fr", "French", "🇫🇷"),
    Language("de", "German", "🇩🇪"),
    Language("it", "Italian", "🇮🇹"),
    Language("pt", "Portuguese", "🇵🇹"),
    Language("ru", "Russian", "🇷🇺"),
    Language("ja", "Japanese", "🇯🇵"),
    Language("ko", "Korean", "🇰🇷"),
    Language("zh", "Chinese", "🇨🇳"),
    Language("ar", "Arabic", "🇸🇦"),
    Language("hi", "Hindi", "🇮🇳"),
    Language("nl", "Dutch", "🇳🇱"),
    Language("sv", "Swedish", "🇸🇪"),
    Language("da", "Danish", "🇩🇰"),
    Language("no", "Norwegian", "🇳🇴"),
    Language("fi", "Finnish", "🇫🇮"),
    Language("th", "Thai", "🇹🇭"),
    Language("vi", "Vietnamese", "🇻🇳"),
)

_BY_CODE: dict[str, Language] = {lang.code: lang for lang in LANGUAGES}


def language_name(code: str) -> str:
    """Display name for a code; unknown codes render upper-cased."""
    lang = _BY_CODE.get(code)
    return lang.name if lang else code.upper()


def list_languages(exclude_auto: bool = False) -> list[Language]:
    if exclude_auto:
        return [lang for lang in LANGUAGES if lang.code != "auto"]
    return list(LANGUAGES)
