"""Slug generation and uniqueness helpers shared by every translatable model.

Slugs are ASCII only. Arabic, Persian and Urdu letters are transliterated
before the character filter runs; scripts without a transliteration collapse
to an empty string and callers fall back to :func:`fallback_slug`.
"""

import re
import unicodedata
from collections.abc import Iterable

MAX_SLUG_LENGTH = 100

_ARABIC_TO_LATIN = {
    # Arabic letters
    "ا": "a", "أ": "a", "إ": "i", "آ": "aa",
    "ب": "b", "ت": "t", "ث": "th", "ج": "j",
    "ح": "h", "خ": "kh", "د": "d", "ذ": "dh",
    "ر": "r", "ز": "z", "س": "s", "ش": "sh",
    "ص": "s", "ض": "d", "ط": "t", "ظ": "z",
    "ع": "a", "غ": "gh", "ف": "f", "ق": "q",
    "ك": "k", "ل": "l", "م": "m", "ن": "n",
    "ه": "h", "و": "w", "ي": "y", "ى": "a",
    "ة": "h", "ء": "",
    # Persian
    "پ": "p", "چ": "ch", "ژ": "zh", "گ": "g", "ک": "k", "ی": "y",
    # Urdu
    "ٹ": "t", "ڈ": "d", "ڑ": "r", "ں": "n", "ے": "e", "ہ": "h",
    # Hamza carriers
    "ئ": "e", "ؤ": "o",
    # Diacritics and tatweel
    "َ": "", "ُ": "", "ِ": "", "ً": "", "ٌ": "",
    "ٍ": "", "ْ": "", "ّ": "", "ـ": "",
}

_ARABIC_BLOCKS = re.compile(
    "[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)
_HTML_TAG = re.compile(r"<[^>]*>")
_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")
_VALID_SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def clean_text_for_slug(text: str) -> str:
    """Strip HTML tags and squeeze whitespace."""
    if not text or not isinstance(text, str):
        return ""
    return re.sub(r"\s+", " ", _HTML_TAG.sub("", text)).strip()


def transliterate(text: str) -> str:
    """Replace Arabic/Persian/Urdu letters with Latin equivalents."""
    return _ARABIC_BLOCKS.sub(lambda m: _ARABIC_TO_LATIN.get(m.group(0), m.group(0)), text)


def generate_slug(text: str) -> str:
    """Return a lowercase, hyphenated, URL-safe slug for ``text``."""
    text = clean_text_for_slug(text)
    if not text:
        return ""

    slug = transliterate(unicodedata.normalize("NFKC", text).lower())
    slug = unicodedata.normalize("NFKD", slug)
    slug = "".join(ch for ch in slug if not unicodedata.combining(ch))
    slug = _NON_SLUG_CHARS.sub("", slug.lower())
    slug = _SEPARATOR_RUNS.sub("-", slug).strip("-")
    return slug[:MAX_SLUG_LENGTH].rstrip("-")


def generate_unique_slug(base_slug: str, existing_slugs: Iterable[str]) -> str:
    """Return ``base_slug`` or the first ``base_slug-N`` not in ``existing_slugs``."""
    taken = set(existing_slugs)
    if base_slug not in taken:
        return base_slug

    counter = 1
    while f"{base_slug}-{counter}" in taken:
        counter += 1
    return f"{base_slug}-{counter}"


def is_valid_slug(slug: str) -> bool:
    """True when ``slug`` is lowercase alphanumerics separated by single hyphens."""
    if not slug or not isinstance(slug, str):
        return False
    return len(slug) <= MAX_SLUG_LENGTH and bool(_VALID_SLUG.match(slug))


def fallback_slug(prefix: str, pk) -> str:
    """Id-based slug for titles that produce no slug characters."""
    return f"{prefix}-{pk}"


__all__ = [
    "MAX_SLUG_LENGTH",
    "clean_text_for_slug",
    "fallback_slug",
    "generate_slug",
    "generate_unique_slug",
    "is_valid_slug",
    "transliterate",
]
