import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ProgramYear",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("is_current", models.BooleanField(db_index=True, default=False)),
                ("is_archived", models.BooleanField(db_index=True, default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "organization",
                    models.ForeignKey(
                        db_column="organization_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="program_years",
                        to="core.organization",
                    ),
                ),
            ],
            options={
                "db_table": "program_years",
                "verbose_name": "Program Year",
                "verbose_name_plural": "Program Years",
                "ordering": ["-start_date"],
            },
        ),
        migrations.AddConstraint(
            model_name="programyear",
            constraint=models.UniqueConstraint(
                condition=models.Q(("is_current", True)),
                fields=("organization",),
                name="unique_current_program_year_per_organization",
            ),
        ),
    ]
