"""Per-locale text for persisted record fields.

Example:
    from translatable.i18n import TranslatableRecord, create_policy

    class Article(TranslatableRecord):
        translatable = ["title"]

    article = Article(create_policy())
    article.set_translation("title", "fr", "Bonjour")
"""
