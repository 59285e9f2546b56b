import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
        ("program_years", "0001_initial"),
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AuditionDate",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("date", models.DateField(db_index=True)),
                ("start_time", models.TimeField()),
                ("end_time", models.TimeField()),
                ("block_length_minutes", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "organization",
                    models.ForeignKey(
                        db_column="organization_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="audition_dates",
                        to="core.organization",
                    ),
                ),
                (
                    "program_year",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="audition_dates",
                        to="program_years.programyear",
                    ),
                ),
            ],
            options={
                "db_table": "audition_dates",
                "verbose_name": "Audition Date",
                "verbose_name_plural": "Audition Dates",
                "ordering": ["date", "start_time"],
                "indexes": [
                    models.Index(fields=["organization", "program_year"], name="audition_dates_org_year_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AuditionSlot",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("slot_time", models.TimeField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Accepted", "Accepted"),
                            ("Rejected", "Rejected"),
                            ("Waitlisted", "Waitlisted"),
                        ],
                        db_index=True,
                        default="Pending",
                        max_length=20,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "audition_date",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="slots",
                        to="auditions.auditiondate",
                    ),
                ),
                (
                    "member",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="audition_slots",
                        to="accounts.member",
                    ),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        db_column="organization_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="audition_slots",
                        to="core.organization",
                    ),
                ),
            ],
            options={
                "db_table": "audition_slots",
                "verbose_name": "Audition Slot",
                "verbose_name_plural": "Audition Slots",
                "ordering": ["slot_time"],
            },
        ),
        migrations.AddConstraint(
            model_name="auditionslot",
            constraint=models.UniqueConstraint(
                fields=("audition_date", "slot_time"),
                name="unique_audition_slot_time",
            ),
        ),
    ]
