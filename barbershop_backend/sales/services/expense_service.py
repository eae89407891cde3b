# PATH: sales/services/expense_service.py

"""
EXPENSE SERVICE

Responsibilities:
- Validate and record a shop expense
- Delete an expense (admin action; no ledger to reverse)
- Sum expenses for a reporting period

Rules:
- amount > 0, quantized to 2dp (ROUND_HALF_UP)
- category is required; description is optional
- expense_date defaults to today (local)
"""

from __future__ import annotations

import logging
from datetime import date as date_type
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from sales.models import Expense

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")


class ExpenseError(ValueError):
    pass


def _money(v) -> Decimal:
    return Decimal(str(v or "0.00")).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _normalize_expense_date(expense_date) -> date_type:
    if expense_date is None:
        return timezone.localdate()
    if isinstance(expense_date, date_type):
        return expense_date
    raise ExpenseError("expense_date must be a date")


@transaction.atomic
def record_expense(
    *,
    category: str,
    amount,
    expense_date=None,
    description: str = "",
    receipt_image: str = "",
) -> Expense:
    amt = _money(amount)
    if amt <= Decimal("0.00"):
        raise ExpenseError("Amount must be > 0")

    category = (category or "").strip()
    if not category:
        raise ExpenseError("Category is required")

    expense = Expense.objects.create(
        expense_date=_normalize_expense_date(expense_date),
        category=category,
        amount=amt,
        description=(description or "").strip(),
        receipt_image=receipt_image or "",
    )

    logger.info(
        "Expense recorded",
        extra={"expense_id": str(expense.id), "category": expense.category, "amount": str(expense.amount)},
    )
    return expense


@transaction.atomic
def delete_expense(expense: Expense) -> None:
    expense_id = str(expense.id)
    expense.delete()
    logger.info("Expense deleted", extra={"expense_id": expense_id})


def expenses_in_period(start: Optional[date_type] = None, end: Optional[date_type] = None):
    qs = Expense.objects.all()
    if start is not None:
        qs = qs.filter(expense_date__gte=start)
    if end is not None:
        qs = qs.filter(expense_date__lte=end)
    return qs


def total_expenses(start: Optional[date_type] = None, end: Optional[date_type] = None) -> Decimal:
    return _money(expenses_in_period(start, end).aggregate(total=Sum("amount"))["total"])
