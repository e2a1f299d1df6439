import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("attachments", "0001_initial"),
        ("categories", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Book",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("isbn", models.CharField(blank=True, max_length=32)),
                ("pages", models.PositiveIntegerField(default=0)),
                ("parts", models.PositiveIntegerField(default=1)),
                ("part_number", models.PositiveIntegerField(default=1)),
                ("total_parts", models.PositiveIntegerField(default=1)),
                ("publish_year", models.CharField(blank=True, max_length=10)),
                ("is_published", models.BooleanField(default=False)),
                ("views", models.PositiveIntegerField(default=0)),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="books",
                        to="categories.category",
                    ),
                ),
            ],
            options={"ordering": ["-created_at", "-id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="BookTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("language_code", models.CharField(choices=[("ar", "Arabic"), ("fa", "Persian"), ("en", "English"), ("ur", "Urdu")], max_length=8)),
                ("is_default", models.BooleanField(default=False)),
                ("title", models.CharField(max_length=255)),
                ("author", models.CharField(blank=True, max_length=255)),
                ("publisher", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("series", models.CharField(blank=True, max_length=255)),
                ("meta_title", models.CharField(blank=True, max_length=255)),
                ("meta_description", models.TextField(blank=True)),
                (
                    "book",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="books.book",
                    ),
                ),
            ],
            options={
                "ordering": ["-is_default", "language_code"],
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(fields=("book", "language_code"), name="uniq_book_translation_language")
                ],
            },
        ),
        migrations.CreateModel(
            name="BookAttachment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=0)),
                ("type", models.CharField(choices=[("cover", "Cover"), ("pdf", "PDF"), ("other", "Other")], max_length=20)),
                ("caption", models.CharField(blank=True, max_length=255)),
                (
                    "attachment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="books_bookattachment_links",
                        to="attachments.attachment",
                    ),
                ),
                (
                    "book",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attachment_links",
                        to="books.book",
                    ),
                ),
            ],
            options={"ordering": ["order", "id"], "abstract": False},
        ),
    ]
