"""Translation resolution shared by articles, books, research, categories and tags."""

from collections.abc import Iterable
from typing import Any, Optional


def resolve_translation(translations: Iterable[Any], language_code: Optional[str] = None) -> Optional[Any]:
    """Pick the best translation for ``language_code``.

    Order of preference: exact language match, the translation flagged
    ``is_default``, the first translation. Returns ``None`` for an empty
    collection. Works on model instances and on plain dicts.
    """
    items = list(translations)
    if not items:
        return None

    if language_code:
        for translation in items:
            if _get(translation, "language_code") == language_code:
                return translation

    for translation in items:
        if _get(translation, "is_default"):
            return translation

    return items[0]


def translated_value(
    translations: Iterable[Any],
    field: str,
    language_code: Optional[str] = None,
    default: str = "",
) -> Any:
    """Resolve a translation and read ``field`` from it; ``default`` when none exists."""
    translation = resolve_translation(translations, language_code)
    if translation is None:
        return default
    value = _get(translation, field)
    return default if value is None else value


def _get(translation: Any, field: str) -> Any:
    if isinstance(translation, dict):
        return translation.get(field)
    return getattr(translation, field, None)


__all__ = ["resolve_translation", "translated_value"]
