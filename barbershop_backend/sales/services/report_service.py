# sales/services/report_service.py

"""
======================================================
PATH: sales/services/report_service.py
======================================================
FINANCIAL REPORTS

Purpose:
- Sales summary for a period (count, revenue, tax, discount, expenses, by payment method).
- Commission report per employee.

Definitions:
- Period bounds are inclusive local dates; either side may be open.
- Revenue = sum(total_amount); net_profit = revenue - expenses dated in the period.
- A sale is attributed to the staff FK it was saved with.
- Commission = revenue * commission_rate / 100, employees only (admins earn none).
"""

from __future__ import annotations

from datetime import date as date_cls, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.db.models import Count, Sum
from django.utils import timezone

from directory.models import Staff, StaffRole
from pos.domain import PaymentMethod
from sales.models import Sale
from sales.services.expense_service import total_expenses

TWOPLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def _money(v) -> Decimal:
    return Decimal(str(v or 0)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _day_start(day: date_cls) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min), timezone.get_current_timezone())


def sales_in_period(start: Optional[date_cls] = None, end: Optional[date_cls] = None):
    qs = Sale.objects.all()
    if start is not None:
        qs = qs.filter(sold_at__gte=_day_start(start))
    if end is not None:
        qs = qs.filter(sold_at__lt=_day_start(end + timedelta(days=1)))
    return qs


def sales_summary(start: Optional[date_cls] = None, end: Optional[date_cls] = None) -> dict:
    qs = sales_in_period(start, end)

    agg = qs.aggregate(
        count=Count("id"),
        subtotal=Sum("subtotal_amount"),
        discount=Sum("discount_amount"),
        tax=Sum("tax_amount"),
        revenue=Sum("total_amount"),
    )

    expenses = total_expenses(start, end)
    revenue = _money(agg["revenue"])

    by_method = {method: Decimal("0.00") for method in PaymentMethod.values}
    for row in qs.order_by().values("payment_method").annotate(total=Sum("total_amount")):
        by_method[row["payment_method"]] = _money(row["total"])

    return {
        "start": start.isoformat() if start else None,
        "end": end.isoformat() if end else None,
        "count": agg["count"] or 0,
        "subtotal": _money(agg["subtotal"]),
        "discount": _money(agg["discount"]),
        "tax": _money(agg["tax"]),
        "revenue": revenue,
        "expenses": expenses,
        "net_profit": revenue - expenses,
        "by_payment_method": by_method,
    }


def commission_report(start: Optional[date_cls] = None, end: Optional[date_cls] = None) -> list:
    totals = {
        row["staff_id"]: row
        for row in sales_in_period(start, end)
        .filter(staff__isnull=False)
        .order_by()
        .values("staff_id")
        .annotate(revenue=Sum("total_amount"), count=Count("id"))
    }

    rows = []
    for staff in Staff.objects.filter(role=StaffRole.EMPLOYEE).order_by("name"):
        row = totals.get(staff.id, {})
        revenue = _money(row.get("revenue"))
        rate = Decimal(staff.commission_rate or 0)
        rows.append(
            {
                "staff_id": str(staff.id),
                "name": staff.name,
                "sales_count": row.get("count", 0),
                "revenue": revenue,
                "commission_rate": rate,
                "commission": _money(revenue * rate / HUNDRED),
            }
        )
    return rows
