from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("login", models.CharField(max_length=150, unique=True)),
                ("password", models.CharField(blank=True, default="", max_length=128)),
                ("email", models.CharField(blank=True, default="", max_length=254)),
                ("bio", models.TextField(blank=True, default="")),
                ("image", models.CharField(blank=True, default="", max_length=512)),
            ],
            options={
                "db_table": "usr",
                "ordering": ["id"],
            },
        ),
    ]
