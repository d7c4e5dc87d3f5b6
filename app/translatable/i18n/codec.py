"""Encoding of per-locale translations into a single text column.

Every locale except the main one is written as a tagged span,
``<locale>text</locale>``, and spans are concatenated without separator:

    <fr>Bonjour</fr><de>Hallo</de>

Text is XML-escaped (``&``, ``<``, ``>``) on encode so it can never contain
the closing marker of its own locale. Decoding is tolerant: anything that is
not a complete span is ignored, so reading never fails on legacy or damaged
content.
"""

import re
from typing import Any, Mapping
from xml.sax.saxutils import escape, unescape

from translatable.i18n.models import TranslationSet

_SPAN_PATTERN = re.compile(
    r"<(?P<locale>[^<>/]+)>(?P<text>.*?)</(?P=locale)>",
    re.DOTALL,
)


def is_empty(value: Any) -> bool:
    """Return True for values that do not count as a translation."""
    return value is None or value == ""


def encode(translations: Mapping[str, Any], main_locale: str) -> str:
    """Serialize translations, leaving out the main locale.

    Args:
        translations: Locale to text mapping, in the order to write spans.
        main_locale: Locale stored in the plain column, never encoded.

    Returns:
        Concatenated tagged spans, or "" when nothing remains.
    """
    return "".join(
        f"<{locale}>{escape(str(value))}</{locale}>"
        for locale, value in translations.items()
        if locale != main_locale and not is_empty(value)
    )


def decode(blob: Any) -> TranslationSet:
    """Parse an encoded column back into a locale to text mapping.

    Args:
        blob: Raw column content. None, bytes and malformed text are accepted.

    Returns:
        Mapping in span order. A repeated locale keeps its last value.
    """
    if not blob:
        return {}
    if isinstance(blob, bytes):
        blob = blob.decode("utf-8", errors="replace")
    elif not isinstance(blob, str):
        blob = str(blob)

    return {
        match.group("locale"): unescape(match.group("text"))
        for match in _SPAN_PATTERN.finditer(blob)
    }


LIKE_ESCAPE = "\\"
"""Escape character paired with locale_pattern() in LIKE clauses."""


def _escape_like(value: str) -> str:
    for char in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(char, LIKE_ESCAPE + char)
    return value


def locale_pattern(locale: str) -> str:
    """Return the SQL LIKE pattern matching an encoded span for locale.

    ``%`` and ``_`` in locale are escaped with LIKE_ESCAPE, so the pattern
    must be used with ``escape=LIKE_ESCAPE``.
    """
    locale = _escape_like(locale)
    return f"%<{locale}>%</{locale}>%"
