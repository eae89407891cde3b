"""
======================================================
PATH: sales/migrations/0001_initial.py
======================================================
MIGRATION: CREATE Sale + SaleItem

Purpose:
- Append-only sale history written by the POS checkout.
- staff/customer links are nullable (name snapshots carry the history).
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("directory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Sale",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                (
                    "invoice_no",
                    models.CharField(
                        max_length=64,
                        unique=True,
                        blank=True,
                        help_text="System-generated receipt number",
                    ),
                ),
                ("staff_name", models.CharField(max_length=255)),
                ("customer_name", models.CharField(max_length=255, null=True, blank=True)),
                ("subtotal_amount", models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))),
                ("discount_amount", models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))),
                ("tax_amount", models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))),
                ("total_amount", models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))),
                ("promotion_code", models.CharField(max_length=50, null=True, blank=True)),
                (
                    "payment_method",
                    models.CharField(
                        max_length=20,
                        choices=[("cash", "Cash"), ("card", "Card"), ("wallet", "Wallet")],
                        default="cash",
                    ),
                ),
                (
                    "tax_mode",
                    models.CharField(
                        max_length=20,
                        choices=[("included", "Included in prices"), ("excluded", "Added on top")],
                        default="excluded",
                    ),
                ),
                ("sold_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("recorded_at", models.DateTimeField(auto_now_add=True)),
                (
                    "staff",
                    models.ForeignKey(
                        null=True,
                        blank=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="sales",
                        to="directory.staff",
                    ),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        null=True,
                        blank=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="sales",
                        to="directory.customer",
                    ),
                ),
            ],
            options={
                "ordering": ["-sold_at"],
                "indexes": [
                    models.Index(fields=["sold_at"], name="sales_sale_sold_at_idx"),
                    models.Index(fields=["staff", "sold_at"], name="sales_sale_staff_sold_idx"),
                    models.Index(fields=["payment_method"], name="sales_sale_payment_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="SaleItem",
            fields=[
                ("id", models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False, serialize=False)),
                ("item_id", models.CharField(max_length=64, db_index=True)),
                (
                    "kind",
                    models.CharField(max_length=20, choices=[("service", "Service"), ("product", "Product")]),
                ),
                ("name", models.CharField(max_length=255)),
                ("quantity", models.PositiveIntegerField()),
                ("unit_price", models.DecimalField(max_digits=10, decimal_places=2)),
                ("total_price", models.DecimalField(max_digits=12, decimal_places=2, editable=False)),
                ("position", models.PositiveIntegerField(default=0)),
                (
                    "sale",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="sales.sale",
                    ),
                ),
            ],
            options={
                "ordering": ["sale", "position"],
                "indexes": [models.Index(fields=["kind", "item_id"], name="sales_saleitem_kind_item_idx")],
            },
        ),
    ]
