"""
======================================================
PATH: catalog/migrations/0001_initial.py
======================================================
MIGRATION: CREATE Service + Product

Purpose:
- Sellable catalog for the POS.
- Barcode is unique only when present (blank/NULL allowed on many rows).
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
            name="Service",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255, db_index=True)),
                ("category", models.CharField(max_length=120, blank=True, default="")),
                ("price", models.DecimalField(max_digits=10, decimal_places=2)),
                ("duration_minutes", models.PositiveIntegerField(default=30)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("name", models.CharField(max_length=255, db_index=True)),
                ("price", models.DecimalField(max_digits=10, decimal_places=2)),
                ("cost", models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))),
                ("stock", models.PositiveIntegerField(default=0)),
                ("barcode", models.CharField(max_length=64, null=True, blank=True, db_index=True)),
                ("low_stock_threshold", models.PositiveIntegerField(null=True, blank=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.AddConstraint(
            model_name="product",
            constraint=models.UniqueConstraint(
                fields=("barcode",),
                condition=models.Q(("barcode__isnull", False), models.Q(("barcode", ""), _negated=True)),
                name="uniq_product_barcode_when_present",
            ),
        ),
    ]
