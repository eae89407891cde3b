# shop/models/settings.py

"""
SHOP SETTINGS (SINGLETON)

Purpose:
- The shop's tax policy (rate + included/excluded) and receipt presentation.

Rules:
- Exactly one row (pk=1); load() creates it with defaults on first use.
- tax_rate is a percentage 0..100.
"""

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from pos.domain import TaxMode, TaxPolicy


class ShopSettings(models.Model):
    SINGLETON_PK = 1

    shop_name = models.CharField(max_length=255, default="Barbershop")
    currency = models.CharField(max_length=10, default="USD")

    tax_rate = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal("0.00"))
    tax_type = models.CharField(
        max_length=20,
        choices=TaxMode.choices,
        default=TaxMode.EXCLUDED,
    )

    receipt_footer = models.TextField(blank=True, default="Thank you for your visit!")

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "shop settings"
        verbose_name_plural = "shop settings"

    def clean(self):
        rate = Decimal(self.tax_rate or 0)
        if rate < Decimal("0") or rate > Decimal("100"):
            raise ValidationError({"tax_rate": "Tax rate must be between 0 and 100."})

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "ShopSettings":
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj

    def tax_policy(self) -> TaxPolicy:
        return TaxPolicy(rate=Decimal(self.tax_rate or 0), mode=TaxMode(self.tax_type))

    def __str__(self):
        return f"{self.shop_name} ({self.currency})"
