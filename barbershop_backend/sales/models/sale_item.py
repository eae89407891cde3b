# sales/models/sale_item.py

"""
SALE ITEM (IMMUTABLE SNAPSHOT)

One sold line: a service or a product, with the name and unit price as they were
at checkout. item_id is the catalog id as text (no FK: catalog rows may be
retired or deleted without touching history).
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import models

from pos.domain import ItemKind

from .sale import Sale


class SaleItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name="items",
    )

    item_id = models.CharField(max_length=64, db_index=True)
    kind = models.CharField(max_length=20, choices=ItemKind.choices)
    name = models.CharField(max_length=255)

    quantity = models.PositiveIntegerField()

    unit_price = models.DecimalField(max_digits=10, decimal_places=2)

    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        editable=False,
    )

    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["sale", "position"]
        indexes = [
            models.Index(fields=["kind", "item_id"], name="sales_saleitem_kind_item_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("SaleItem records are immutable")

        self.total_price = Decimal(self.unit_price) * Decimal(int(self.quantity or 0))
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} x {self.quantity}"
