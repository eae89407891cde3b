# catalog/models/service.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class Service(models.Model):
    """
    A bookable / sellable service (haircut, beard trim, ...).

    Services carry no stock; checkout never touches them beyond the sale record.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)
    category = models.CharField(max_length=120, blank=True, default="")

    price = models.DecimalField(max_digits=10, decimal_places=2)

    duration_minutes = models.PositiveIntegerField(default=30)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def clean(self):
        if self.price is None or Decimal(self.price) < Decimal("0.00"):
            raise ValidationError({"price": "Price cannot be negative"})

    def __str__(self):
        return f"{self.name} ({self.duration_minutes} min)"
