"""
======================================================
PATH: shop/migrations/0001_initial.py
======================================================
MIGRATION: CREATE ShopSettings (singleton) + PromotionCode
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
            name="ShopSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("shop_name", models.CharField(max_length=255, default="Barbershop")),
                ("currency", models.CharField(max_length=10, default="USD")),
                ("tax_rate", models.DecimalField(max_digits=5, decimal_places=2, default=Decimal("0.00"))),
                (
                    "tax_type",
                    models.CharField(
                        max_length=20,
                        choices=[("included", "Included in prices"), ("excluded", "Added on top")],
                        default="excluded",
                    ),
                ),
                ("receipt_footer", models.TextField(blank=True, default="Thank you for your visit!")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"verbose_name": "shop settings", "verbose_name_plural": "shop settings"},
        ),
        migrations.CreateModel(
            name="PromotionCode",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("code", models.CharField(max_length=50, unique=True)),
                (
                    "kind",
                    models.CharField(
                        max_length=20,
                        choices=[("percentage", "Percentage"), ("fixed", "Fixed amount")],
                        default="percentage",
                    ),
                ),
                ("value", models.DecimalField(max_digits=10, decimal_places=2)),
                ("description", models.CharField(max_length=255, blank=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["code"]},
        ),
    ]
