# sales/models/expense.py

import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class Expense(models.Model):
    """
    Money paid out by the shop (rent, supplies, utilities...).

    Rules:
    - amount is strictly positive, 2dp
    - expense_date is the local business day the cost belongs to
    - receipt_image is an optional data URL captured at the counter
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    expense_date = models.DateField(default=timezone.localdate)
    category = models.CharField(max_length=80)

    amount = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(0.01)],
    )

    description = models.CharField(max_length=255, blank=True, default="")
    receipt_image = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-expense_date", "-created_at"]
        verbose_name = "Expense"
        verbose_name_plural = "Expenses"
        indexes = [
            models.Index(fields=["expense_date"], name="sales_expense_date_idx"),
        ]

    def __str__(self):
        return f"{self.category} - {self.amount} ({self.expense_date})"
