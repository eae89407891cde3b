# catalog/models/product.py

import uuid
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q


class Product(models.Model):
    """
    Represents a retail product sold over the counter.

    STOCK MODEL:
    - stock is a single on-hand counter per product (no batches)
    - checkout writes the decremented value back through the inventory sink
    - stock never goes negative (floored at zero by the POS core)
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)

    # Selling price
    price = models.DecimalField(max_digits=10, decimal_places=2)

    # Purchase cost (reporting only)
    cost = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0.00"))

    stock = models.PositiveIntegerField(default=0)

    barcode = models.CharField(max_length=64, null=True, blank=True, db_index=True)

    low_stock_threshold = models.PositiveIntegerField(null=True, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        constraints = [
            models.UniqueConstraint(
                fields=["barcode"],
                condition=Q(barcode__isnull=False) & ~Q(barcode=""),
                name="uniq_product_barcode_when_present",
            ),
        ]

    def clean(self):
        if self.price is None or Decimal(self.price) < Decimal("0.00"):
            raise ValidationError({"price": "Price cannot be negative"})

        if self.cost is not None and Decimal(self.cost) < Decimal("0.00"):
            raise ValidationError({"cost": "Cost cannot be negative"})

        if self.barcode is not None:
            self.barcode = self.barcode.strip() or None

    @property
    def effective_low_stock_threshold(self) -> int:
        default = getattr(settings, "POS_LOW_STOCK_DEFAULT", 15)
        return int(self.low_stock_threshold or default)

    @property
    def is_low_stock(self) -> bool:
        return int(self.stock or 0) <= self.effective_low_stock_threshold

    def __str__(self):
        return f"{self.name} ({self.stock} on hand)"
