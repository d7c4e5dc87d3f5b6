"""Tests for translatable.i18n.query module."""

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, Text, select
from sqlalchemy.dialects import sqlite

from translatable.i18n import ResolutionPolicy, TranslatableRecord, where_locale, where_locales


@pytest.fixture
def articles():
    metadata = MetaData()
    return Table(
        "articles",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("title", String(255), nullable=True),
        Column("titleTranslations", Text, nullable=True),
    )


def compile_where(table, clause) -> str:
    statement = select(table.c.id).where(clause)
    return str(
        statement.compile(
            dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


@pytest.mark.unit
class TestWhereLocale:
    def test_main_locale_checks_plain_column(self, articles):
        sql = compile_where(articles, where_locale(articles, "title", "en", "en"))

        assert "articles.title IS NOT NULL" in sql
        assert "articles.title != ''" in sql
        assert "titleTranslations" not in sql

    def test_other_locale_matches_encoded_column(self, articles):
        sql = compile_where(articles, where_locale(articles, "title", "fr", "en"))

        assert "articles.\"titleTranslations\" LIKE '%<fr>%</fr>%'" in sql

    def test_underscore_in_locale_is_escaped(self, articles):
        sql = compile_where(articles, where_locale(articles, "title", "fr_CA", "en"))

        assert "%<fr\\_CA>%</fr\\_CA>%" in sql
        assert " ESCAPE " in sql


@pytest.mark.unit
class TestWhereLocales:
    def test_or_combination(self, articles):
        sql = compile_where(
            articles, where_locales(articles, "title", ["en", "fr", "de"], "en")
        )

        assert " OR " in sql
        assert "articles.title IS NOT NULL" in sql
        assert "'%<fr>%</fr>%'" in sql
        assert "'%<de>%</de>%'" in sql

    def test_no_locales_matches_nothing(self, articles):
        sql = compile_where(articles, where_locales(articles, "title", [], "en"))

        assert "0 = 1" in sql or "false" in sql.lower()

    def test_record_shortcuts_use_policy_main_locale(self, articles):
        class Article(TranslatableRecord):
            translatable = ["title"]

        article = Article(ResolutionPolicy(main_locale="fr"))

        main_sql = compile_where(articles, article.where_locale(articles, "title", "fr"))
        other_sql = compile_where(
            articles, article.where_locales(articles, "title", ["en"])
        )

        assert "articles.title IS NOT NULL" in main_sql
        assert "'%<en>%</en>%'" in other_sql
