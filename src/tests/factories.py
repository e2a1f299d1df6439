"""Builders for content rows used across tests."""

from __future__ import annotations

import tempfile

from django.core.files.base import ContentFile

from articles.models import Article, ArticleTranslation
from attachments.models import Attachment
from categories.models import Category, CategoryTranslation
from tags.models import Tag, TagTranslation

TEMP_MEDIA_ROOT = tempfile.mkdtemp(prefix="content-api-tests-")


def make_category(slug="general", kind=Category.Kind.ARTICLE, names=None) -> Category:
    category = Category.objects.create(slug=slug, kind=kind)
    for index, (language, name) in enumerate((names or {"ar": "عام", "en": "General"}).items()):
        CategoryTranslation.objects.create(
            category=category, language_code=language, is_default=index == 0, name=name
        )
    return category


def make_tag(slug="python", name="Python") -> Tag:
    tag = Tag.objects.create(slug=slug)
    TagTranslation.objects.create(tag=tag, language_code="en", is_default=True, name=name)
    return tag


def make_article(category, slug="hello-world", title="Hello World", **fields) -> Article:
    article = Article.objects.create(category=category, slug=slug, **fields)
    ArticleTranslation.objects.create(article=article, language_code="en", is_default=True, title=title, body="Body")
    return article


def make_attachment(name="doc.pdf", mime_type="application/pdf") -> Attachment:
    attachment = Attachment(original_name=name, mime_type=mime_type, size=3)
    attachment.file.save(name, ContentFile(b"pdf"), save=False)
    attachment.save()
    return attachment


def translation(language="en", title="Hello World", is_default=True, **extra) -> dict:
    return {"languageCode": language, "isDefault": is_default, "title": title, **extra}


def article_payload(category, translations=None, **fields) -> dict:
    payload = {
        "categoryId": category.pk,
        "translations": translations or [translation(body="Some body")],
    }
    payload.update(fields)
    return payload
