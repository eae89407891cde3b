# sales/models/sale.py

import uuid
from decimal import Decimal

from django.db import models
from django.utils import timezone

from pos.domain import PaymentMethod, TaxMode


class Sale(models.Model):
    """
    Persisted copy of a completed POS checkout.

    GUARANTEES:
    - Append-only: a saved Sale is never updated (deletion is an admin action)
    - id is the POS core's sale id, so a retried append cannot create a duplicate
    - Money is stored at 2dp; the core's exact figures are rounded on the way in
    - staff_name / customer_name are snapshots taken at sale time

    Notes:
    - staff / customer FKs are best-effort links for reporting; they are NULL when
      the id did not resolve (the snapshot name still records who it was).
    - total_amount may be negative when a fixed promotion exceeds the subtotal.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    invoice_no = models.CharField(
        max_length=64,
        unique=True,
        blank=True,
        help_text="System-generated receipt number",
    )

    staff = models.ForeignKey(
        "directory.Staff",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales",
    )
    staff_name = models.CharField(max_length=255)

    customer = models.ForeignKey(
        "directory.Customer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="sales",
    )
    customer_name = models.CharField(max_length=255, null=True, blank=True)

    subtotal_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    discount_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    promotion_code = models.CharField(max_length=50, null=True, blank=True)

    payment_method = models.CharField(
        max_length=20,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH,
    )
    tax_mode = models.CharField(
        max_length=20,
        choices=TaxMode.choices,
        default=TaxMode.EXCLUDED,
    )

    sold_at = models.DateTimeField(default=timezone.now)
    recorded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-sold_at"]
        indexes = [
            models.Index(fields=["sold_at"], name="sales_sale_sold_at_idx"),
            models.Index(fields=["staff", "sold_at"], name="sales_sale_staff_sold_idx"),
            models.Index(fields=["payment_method"], name="sales_sale_payment_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Sale records are append-only and cannot be changed.")

        if not self.invoice_no:
            prefix = timezone.localtime(self.sold_at or timezone.now()).strftime("INV%Y%m%d")
            self.invoice_no = f"{prefix}-{uuid.uuid4().hex[:8].upper()}"

        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.invoice_no} | {self.total_amount}"
