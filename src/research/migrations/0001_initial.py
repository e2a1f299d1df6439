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
            name="Research",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("date", models.DateField()),
                ("pages", models.PositiveIntegerField(default=0)),
                ("views", models.PositiveIntegerField(default=0)),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="research",
                        to="categories.category",
                    ),
                ),
            ],
            options={"ordering": ["-created_at", "-id"], "abstract": False, "verbose_name_plural": "research"},
        ),
        migrations.CreateModel(
            name="ResearchTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("language_code", models.CharField(choices=[("ar", "Arabic"), ("fa", "Persian"), ("en", "English"), ("ur", "Urdu")], max_length=8)),
                ("is_default", models.BooleanField(default=False)),
                ("title", models.CharField(max_length=255)),
                ("abstract", models.TextField()),
                (
                    "research",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="research.research",
                    ),
                ),
            ],
            options={
                "ordering": ["-is_default", "language_code"],
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(fields=("research", "language_code"), name="uniq_research_translation_language")
                ],
            },
        ),
        migrations.CreateModel(
            name="ResearchAttachment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=0)),
                ("type", models.CharField(choices=[("pdf", "PDF"), ("image", "Image"), ("other", "Other")], max_length=20)),
                (
                    "attachment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="research_researchattachment_links",
                        to="attachments.attachment",
                    ),
                ),
                (
                    "research",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attachment_links",
                        to="research.research",
                    ),
                ),
            ],
            options={"ordering": ["order", "id"], "abstract": False},
        ),
    ]
