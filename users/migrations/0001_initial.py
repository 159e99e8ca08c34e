from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.TextField(help_text="Full name.")),
                ("age", models.IntegerField(help_text="Age in years.")),
                ("email", models.TextField(help_text="Unique across all records.", unique=True)),
                ("dob", models.DateField(help_text="Date of birth (YYYY-MM-DD).", verbose_name="Date of Birth")),
                (
                    "profile_pic",
                    models.TextField(
                        blank=True,
                        db_column="profilePic",
                        help_text="Public path of the uploaded picture, e.g. /uploads/1700000000000.png.",
                        null=True,
                        verbose_name="Profile Picture",
                    ),
                ),
                (
                    "gender",
                    models.TextField(
                        choices=[("Male", "Male"), ("Female", "Female"), ("Others", "Others")],
                        help_text="Single choice.",
                    ),
                ),
                ("skills", models.JSONField(blank=True, default=list, help_text="List of strings, e.g. ['JS','Python']")),
                ("bio", models.TextField(help_text="Free text.")),
            ],
            options={
                "verbose_name": "User",
                "verbose_name_plural": "Users",
                "db_table": "users",
                "ordering": ["id"],
            },
        ),
    ]
