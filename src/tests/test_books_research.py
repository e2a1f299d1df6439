"""Books and research papers."""

from __future__ import annotations

from django.test import override_settings

from books.models import Book
from research.models import Research
from tests.factories import TEMP_MEDIA_ROOT, make_attachment, make_category
from tests.utils import APITestCase

BOOKS_URL = "/api/v1/en/books/"
RESEARCH_URL = "/api/v1/en/research/"


@override_settings(MEDIA_ROOT=TEMP_MEDIA_ROOT)
class BookTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        super().setUpTestData()
        cls.category = make_category(slug="novels", kind="book")

    def _payload(self, **fields):
        payload = {
            "categoryId": self.category.pk,
            "pages": 320,
            "isbn": "978-3-16-148410-0",
            "publishYear": "2020",
            "translations": [
                {"languageCode": "en", "isDefault": True, "title": "The Long Road", "author": "A. Writer", "series": "Roads"},
            ],
        }
        payload.update(fields)
        return payload

    def test_create_book_with_cover(self):
        cover = make_attachment("cover.png", "image/png")
        payload = self._payload(attachments=[{"attachmentId": cover.pk, "type": "cover", "order": 0, "caption": "Front"}])

        response = self.editor_client.post(BOOKS_URL, payload, format="json")
        data = response.json()["data"]

        self.assertEqual(response.status_code, 201)
        self.assertEqual(data["slug"], "the-long-road")
        self.assertEqual(data["author"], "A. Writer")
        self.assertEqual(data["attachments"][0]["caption"], "Front")
        self.assertEqual(data["category"]["slug"], "novels")

    def test_rejects_article_link_type(self):
        cover = make_attachment("cover.png", "image/png")
        payload = self._payload(attachments=[{"attachmentId": cover.pk, "type": "featured", "order": 0}])
        self.assertEqual(self.editor_client.post(BOOKS_URL, payload, format="json").status_code, 400)

    def test_part_number_cannot_exceed_total(self):
        response = self.editor_client.post(BOOKS_URL, self._payload(partNumber=3, totalParts=2), format="json")
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Book.objects.exists())

    def test_filter_by_author_and_year(self):
        self.editor_client.post(BOOKS_URL, self._payload(), format="json")
        other = self._payload(publishYear="1999")
        other["translations"][0].update(title="Another", author="Someone Else")
        self.editor_client.post(BOOKS_URL, other, format="json")

        by_author = self.anon_client.get(BOOKS_URL, {"author": "writer"}).json()["data"]["items"]
        by_year = self.anon_client.get(BOOKS_URL, {"year": "1999"}).json()["data"]["items"]

        self.assertEqual([item["slug"] for item in by_author], ["the-long-road"])
        self.assertEqual([item["slug"] for item in by_year], ["another"])


class ResearchTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        super().setUpTestData()
        cls.category = make_category(slug="papers", kind="research")

    def _create(self, title, date):
        payload = {
            "categoryId": self.category.pk,
            "date": date,
            "pages": 12,
            "translations": [{"languageCode": "en", "isDefault": True, "title": title, "abstract": "Abstract"}],
        }
        return self.editor_client.post(RESEARCH_URL, payload, format="json")

    def test_create_research(self):
        response = self._create("On Slugs", "2024-05-01")
        data = response.json()["data"]

        self.assertEqual(response.status_code, 201)
        self.assertEqual(data["slug"], "on-slugs")
        self.assertEqual(data["abstract"], "Abstract")
        self.assertEqual(Research.objects.get().pages, 12)

    def test_abstract_required(self):
        payload = {
            "categoryId": self.category.pk,
            "date": "2024-05-01",
            "pages": 1,
            "translations": [{"languageCode": "en", "isDefault": True, "title": "T"}],
        }
        self.assertEqual(self.editor_client.post(RESEARCH_URL, payload, format="json").status_code, 400)

    def test_date_range_filter(self):
        self._create("Old", "2020-01-01")
        self._create("New", "2024-01-01")

        items = self.anon_client.get(RESEARCH_URL, {"dateFrom": "2023-01-01"}).json()["data"]["items"]
        self.assertEqual([item["slug"] for item in items], ["new"])

        response = self.anon_client.get(RESEARCH_URL, {"dateFrom": "2024-01-01", "dateTo": "2020-01-01"})
        self.assertEqual(response.status_code, 400)
