"""
======================================================
PATH: directory/migrations/0001_initial.py
======================================================
MIGRATION: CREATE Staff + Customer
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Staff",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255, db_index=True)),
                (
                    "role",
                    models.CharField(
                        max_length=20,
                        choices=[("admin", "Admin"), ("employee", "Employee")],
                        default="employee",
                        db_index=True,
                    ),
                ),
                (
                    "commission_rate",
                    models.DecimalField(
                        max_digits=5,
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Commission percentage (0-100) on attributed revenue.",
                    ),
                ),
                ("phone", models.CharField(max_length=50, blank=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["name"], "verbose_name_plural": "staff"},
        ),
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255, db_index=True)),
                ("phone", models.CharField(max_length=50, blank=True)),
                ("email", models.EmailField(max_length=254, blank=True)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["name"]},
        ),
    ]
