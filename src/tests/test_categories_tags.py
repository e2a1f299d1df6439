"""Categories and tags."""

from __future__ import annotations

from categories.models import Category
from tags.models import Tag
from tests.factories import make_article, make_category
from tests.utils import APITestCase

CATEGORIES_URL = "/api/v1/en/categories/"
TAGS_URL = "/api/v1/en/tags/"


def category_translation(language="en", name="Science", is_default=True, **extra):
    return {"languageCode": language, "isDefault": is_default, "name": name, **extra}


class CategoryTests(APITestCase):
    def test_create_category(self):
        payload = {
            "kind": "book",
            "sortOrder": 3,
            "translations": [category_translation(description="All about science", metaTitle="Sci")],
        }
        response = self.editor_client.post(CATEGORIES_URL, payload, format="json")
        data = response.json()["data"]

        self.assertEqual(response.status_code, 201)
        self.assertEqual(data["slug"], "science")
        self.assertEqual(data["kind"], "book")
        self.assertEqual(data["name"], "Science")
        self.assertEqual(data["metaTitle"], "Sci")

    def test_parent_must_share_kind(self):
        parent = make_category(slug="parent", kind="research")
        payload = {"kind": "article", "parentId": parent.pk, "translations": [category_translation()]}
        response = self.editor_client.post(CATEGORIES_URL, payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["details"][0]["field"], "parentId")

    def test_category_cannot_be_its_own_parent(self):
        category = make_category()
        response = self.editor_client.patch(
            f"{CATEGORIES_URL}{category.pk}/", {"parentId": category.pk}, format="json"
        )
        self.assertEqual(response.status_code, 400)

    def _change_kind(self, category, kind):
        return self.editor_client.patch(f"{CATEGORIES_URL}{category.pk}/", {"kind": kind}, format="json")

    def test_kind_change_checks_existing_parent(self):
        parent = make_category(slug="parent")
        child = make_category(slug="child")
        child.parent = parent
        child.save()

        response = self._change_kind(child, "book")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["details"][0]["field"], "parentId")
        child.refresh_from_db()
        self.assertEqual(child.kind, "article")

    def test_kind_change_checks_children(self):
        parent = make_category(slug="parent")
        Category.objects.filter(pk=make_category(slug="child").pk).update(parent=parent)

        response = self._change_kind(parent, "book")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["details"][0]["field"], "kind")

    def test_kind_change_refused_while_content_is_filed(self):
        category = make_category()
        make_article(category)

        response = self._change_kind(category, "research")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["details"][0]["field"], "kind")

    def test_kind_change_of_unused_category(self):
        category = make_category()
        response = self._change_kind(category, "book")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["kind"], "book")

    def test_delete_referenced_category_conflicts(self):
        category = make_category()
        make_article(category)

        response = self.editor_client.delete(f"{CATEGORIES_URL}{category.pk}/")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "CONFLICT")
        self.assertTrue(Category.objects.filter(pk=category.pk).exists())

    def test_delete_unused_category(self):
        category = make_category()
        response = self.editor_client.delete(f"{CATEGORIES_URL}{category.pk}/")
        self.assertEqual(response.status_code, 204)

    def test_list_filters_by_kind(self):
        make_category(slug="a", kind="article")
        make_category(slug="b", kind="book")

        items = self.anon_client.get(CATEGORIES_URL, {"kind": "book"}).json()["data"]["items"]
        self.assertEqual([item["slug"] for item in items], ["b"])

    def test_by_slug(self):
        make_category(slug="general")
        response = self.anon_client.get(f"{CATEGORIES_URL}slug/general/")
        self.assertEqual(response.json()["data"]["name"], "General")


class TagTests(APITestCase):
    def test_create_tag(self):
        payload = {"translations": [{"languageCode": "en", "isDefault": True, "name": "Machine Learning"}]}
        response = self.editor_client.post(TAGS_URL, payload, format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["data"]["slug"], "machine-learning")

    def test_tag_name_required(self):
        payload = {"translations": [{"languageCode": "en", "isDefault": True, "name": ""}]}
        response = self.editor_client.post(TAGS_URL, payload, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(Tag.objects.exists())

    def test_arabic_name_is_transliterated(self):
        payload = {"translations": [{"languageCode": "ar", "isDefault": True, "name": "سلام"}]}
        response = self.editor_client.post(TAGS_URL, payload, format="json")
        self.assertEqual(response.json()["data"]["slug"], "slam")

    def test_reader_cannot_create(self):
        payload = {"translations": [{"languageCode": "en", "isDefault": True, "name": "X"}]}
        self.assertEqual(self.reader_client.post(TAGS_URL, payload, format="json").status_code, 403)
