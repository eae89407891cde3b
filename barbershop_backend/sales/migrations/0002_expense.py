"""
======================================================
PATH: sales/migrations/0002_expense.py
======================================================
MIGRATION: CREATE Expense

Purpose:
- Shop expenses, netted against revenue in the sales summary.
"""

from __future__ import annotations

import uuid

import django.core.validators
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("sales", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Expense",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("expense_date", models.DateField(default=django.utils.timezone.localdate)),
                ("category", models.CharField(max_length=80)),
                (
                    "amount",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=14,
                        validators=[django.core.validators.MinValueValidator(0.01)],
                    ),
                ),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                ("receipt_image", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Expense",
                "verbose_name_plural": "Expenses",
                "ordering": ["-expense_date", "-created_at"],
                "indexes": [models.Index(fields=["expense_date"], name="sales_expense_date_idx")],
            },
        ),
    ]
