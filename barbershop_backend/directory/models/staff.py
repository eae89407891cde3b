# directory/models/staff.py

"""
STAFF MODEL

Purpose:
- The people a sale can be attributed to (the "barber" on the receipt).
- Commission rate drives the commission report.

Rules:
- role is admin | employee; only employees earn commission in reports.
- commission_rate is a percentage 0..100.
- Staff are deactivated, never deleted (sales keep a name snapshot anyway).
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class StaffRole(models.TextChoices):
    ADMIN = "admin", "Admin"
    EMPLOYEE = "employee", "Employee"


class Staff(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)

    role = models.CharField(
        max_length=20,
        choices=StaffRole.choices,
        default=StaffRole.EMPLOYEE,
        db_index=True,
    )

    commission_rate = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Commission percentage (0-100) on attributed revenue.",
    )

    phone = models.CharField(max_length=50, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "staff"

    def clean(self):
        rate = Decimal(self.commission_rate or 0)
        if rate < Decimal("0") or rate > Decimal("100"):
            raise ValidationError({"commission_rate": "Commission must be between 0 and 100."})

    @property
    def is_employee(self) -> bool:
        return self.role == StaffRole.EMPLOYEE

    def __str__(self):
        return f"{self.name} ({self.get_role_display()})"
