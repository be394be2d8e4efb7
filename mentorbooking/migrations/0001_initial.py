import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("company", models.CharField(blank=True, max_length=255)),
                ("starts_at", models.DateTimeField()),
                ("required_mentors", models.PositiveIntegerField(default=1)),
                ("requesting_mentors", models.JSONField(blank=True, default=list)),
                ("accepted_mentors", models.JSONField(blank=True, default=list)),
                ("declined_mentors", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "mentorbooking_events",
                "ordering": ["starts_at"],
                "indexes": [
                    models.Index(fields=["starts_at"], name="event_starts_at_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Account",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("guest", "Guest"),
                            ("mentor", "Mentor"),
                            ("coach", "Coach"),
                            ("staff", "Staff"),
                            ("mentoringmanagement", "Mentoring Management"),
                            ("super-admin", "Super Admin"),
                        ],
                        default="guest",
                        max_length=32,
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="account",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
        ),
    ]
