from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("access_control", "0001_initial"),
        ("authentication", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="user",
            name="roles",
            field=models.ManyToManyField(
                blank=True,
                related_name="users",
                through="access_control.UserRole",
                to="access_control.role",
            ),
        ),
    ]
