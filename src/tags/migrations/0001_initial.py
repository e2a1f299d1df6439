import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Tag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["id"], "abstract": False},
        ),
        migrations.CreateModel(
            name="TagTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("language_code", models.CharField(choices=[("ar", "Arabic"), ("fa", "Persian"), ("en", "English"), ("ur", "Urdu")], max_length=8)),
                ("is_default", models.BooleanField(default=False)),
                ("name", models.CharField(max_length=100)),
                (
                    "tag",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="translations",
                        to="tags.tag",
                    ),
                ),
            ],
            options={
                "ordering": ["-is_default", "language_code"],
                "abstract": False,
                "constraints": [
                    models.UniqueConstraint(fields=("tag", "language_code"), name="uniq_tag_translation_language")
                ],
            },
        ),
    ]
