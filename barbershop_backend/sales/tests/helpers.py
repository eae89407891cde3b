# sales/tests/helpers.py

from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from pos.domain import ItemKind, LineItem, PriceBreakdown, TaxMode, build_sale


def make_core_sale(
    *,
    staff_id,
    staff_name="Marcus",
    customer_id=None,
    customer_name=None,
    total="25.00",
    tax="0",
    tax_mode=TaxMode.EXCLUDED,
    payment_method="cash",
    sold_at: datetime = None,
    lines=None,
):
    lines = lines or [
        LineItem(item_id="svc-1", kind=ItemKind.SERVICE, name="Classic Haircut", unit_price=Decimal(total)),
    ]
    subtotal = sum((line.line_total for line in lines), Decimal("0"))
    if tax_mode == TaxMode.INCLUDED:
        discount = subtotal - Decimal(total)
    else:
        discount = subtotal - (Decimal(total) - Decimal(tax))
    breakdown = PriceBreakdown(
        subtotal=subtotal,
        discount=discount,
        tax=Decimal(tax),
        total=Decimal(total),
    )
    return build_sale(
        lines=lines,
        staff_id=str(staff_id),
        customer_id=str(customer_id) if customer_id else None,
        breakdown=breakdown,
        payment_method=payment_method,
        tax_mode=tax_mode,
        staff_name=staff_name,
        customer_name=customer_name,
        timestamp=sold_at or timezone.now(),
    )
