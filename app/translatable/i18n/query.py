"""SQLAlchemy predicates filtering rows by translated locale.

The main locale lives in the plain column, so it is matched directly; any
other locale is matched with a LIKE on the encoded column.

Usage:
    from sqlalchemy import select

    stmt = select(articles).where(
        where_locales(articles, "title", ["en", "fr"], main_locale="en")
    )
"""

from typing import Sequence

from sqlalchemy import Table, and_, false, or_
from sqlalchemy.sql.elements import ColumnElement

from translatable.i18n.codec import LIKE_ESCAPE, locale_pattern
from translatable.i18n.models import translation_key


def where_locale(
    table: Table, column: str, locale: str, main_locale: str
) -> ColumnElement:
    """Build a predicate matching rows translated into locale.

    Args:
        table: Table holding the translatable column pair.
        column: Translatable field name.
        locale: Locale that must be present.
        main_locale: Locale stored in the plain column.

    Returns:
        SQLAlchemy boolean clause.
    """
    if locale == main_locale:
        plain = table.c[column]
        return and_(plain.isnot(None), plain != "")

    return table.c[translation_key(column)].like(
        locale_pattern(locale), escape=LIKE_ESCAPE
    )


def where_locales(
    table: Table, column: str, locales: Sequence[str], main_locale: str
) -> ColumnElement:
    """Build a predicate matching rows translated into any of locales."""
    if not locales:
        return false()

    return or_(
        *(where_locale(table, column, locale, main_locale) for locale in locales)
    )
