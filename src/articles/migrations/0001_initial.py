import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("attachments", "0001_initial"),
        ("categories", "0001_initial"),
        ("tags", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Article",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("is_published", models.BooleanField(default=False)),
                ("views", models.PositiveIntegerField(default=0)),
                ("tags", models.ManyToManyField(blank=True, related_name="articles", to="tags.tag")),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="articles",
                        to="categories.category",
                    ),
                ),
            ],
            options={"ordering": ["-created_at", "-id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="ArticleTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("language_code", models.CharField(choices=[("ar", "Arabic"), ("fa", "Persian"), ("en", "English"), ("ur", "Urdu")], max_length=8)),
                ("is_default", models.BooleanField(default=False)),
                ("title", models.CharField(max_length=255)),
                ("summary", models.TextField(blank=True)),
                ("body", models.TextField()),
                ("meta_title", models.CharField(blank=True, max_length=255)),
                ("meta_description", models.TextField(blank=True)),
                (
                    "article",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="articles.article",
                    ),
                ),
            ],
            options={
                "ordering": ["-is_default", "language_code"],
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(fields=("article", "language_code"), name="uniq_article_translation_language")
                ],
            },
        ),
        migrations.CreateModel(
            name="ArticleAttachment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=0)),
                ("type", models.CharField(choices=[("featured", "Featured"), ("gallery", "Gallery"), ("attachment", "Attachment"), ("other", "Other")], max_length=20)),
                ("caption", models.CharField(blank=True, max_length=255)),
                (
                    "attachment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="articles_articleattachment_links",
                        to="attachments.attachment",
                    ),
                ),
                (
                    "article",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attachment_links",
                        to="articles.article",
                    ),
                ),
            ],
            options={"ordering": ["order", "id"], "abstract": False},
        ),
    ]
