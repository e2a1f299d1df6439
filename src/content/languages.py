"""Languages content can be translated into."""

from typing import NamedTuple


class Language(NamedTuple):
    code: str
    name: str
    native_name: str


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language("ar", "Arabic", "العربية"),
    Language("fa", "Persian", "فارسی"),
    Language("en", "English", "English"),
    Language("ur", "Urdu", "اردو"),
)

DEFAULT_LANGUAGE = "ar"

LANGUAGE_CODES = tuple(language.code for language in SUPPORTED_LANGUAGES)
LANGUAGE_CHOICES = [(language.code, language.name) for language in SUPPORTED_LANGUAGES]


def is_supported_language(code: str | None) -> bool:
    return code in LANGUAGE_CODES


def get_language(code: str) -> Language | None:
    for language in SUPPORTED_LANGUAGES:
        if language.code == code:
            return language
    return None


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_CHOICES",
    "LANGUAGE_CODES",
    "Language",
    "SUPPORTED_LANGUAGES",
    "get_language",
    "is_supported_language",
]
