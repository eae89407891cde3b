# shop/models/promotion.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from pos.domain import DiscountKind


class PromotionCode(models.Model):
    """
    A discount code the cashier can type at the till.

    - code is stored upper-case (entry is case-insensitive)
    - percentage: value is 0..100 of the subtotal
    - fixed: value is a flat amount (not capped at the subtotal)
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    code = models.CharField(max_length=50, unique=True)
    kind = models.CharField(max_length=20, choices=DiscountKind.choices, default=DiscountKind.PERCENTAGE)
    value = models.DecimalField(max_digits=10, decimal_places=2)
    description = models.CharField(max_length=255, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["code"]

    def clean(self):
        value = Decimal(self.value or 0)
        if value < Decimal("0"):
            raise ValidationError({"value": "Discount value cannot be negative."})
        if self.kind == DiscountKind.PERCENTAGE and value > Decimal("100"):
            raise ValidationError({"value": "Percentage discount cannot exceed 100."})

    def save(self, *args, **kwargs):
        self.code = (self.code or "").strip().upper()
        super().save(*args, **kwargs)

    def __str__(self):
        if self.kind == DiscountKind.PERCENTAGE:
            return f"{self.code} ({self.value}% off)"
        return f"{self.code} ({self.value} off)"
