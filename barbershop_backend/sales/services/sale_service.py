# sales/services/sale_service.py

"""
======================================================
PATH: sales/services/sale_service.py
======================================================
SALE SINK (DJANGO-BACKED)

Purpose:
- Append a completed POS core Sale as Sale + SaleItem rows.

Rules:
- One transaction per sale: either the header and every line land, or nothing.
- Money is quantized to 2dp (ROUND_HALF_UP) here and only here.
- Subtotal and total are rounded; discount (excluded tax) or tax (included
  tax) is derived from them so the stored parts add up to the stored total.
- Staff/customer FKs are linked only when the id resolves; name snapshots are
  always stored.
- Database failures surface as PersistenceFailure(target="sale"); the caller
  (checkout orchestrator) decides what to tell the cashier.
"""

from __future__ import annotations

import logging
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from django.db import DatabaseError, transaction

from directory.models import Customer, Staff
from pos.domain import TaxMode
from pos.exceptions import PersistenceFailure
from sales.models import Sale, SaleItem

logger = logging.getLogger(__name__)

TWOPLACES = Decimal("0.01")


def _money(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0.00")
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def _existing_pk(model, raw_id) -> Optional[uuid.UUID]:
    if not raw_id:
        return None
    try:
        pk = uuid.UUID(str(raw_id))
    except (TypeError, ValueError):
        return None
    return pk if model.objects.filter(pk=pk).exists() else None


def _stored_amounts(sale) -> dict:
    """
    Round subtotal and total, then derive the remaining part so the stored
    row always satisfies subtotal - discount + tax == total (excluded) or
    subtotal - discount == total (included).
    """
    subtotal = _money(sale.subtotal)
    total = _money(sale.total)

    if str(sale.tax_mode) == TaxMode.INCLUDED:
        tax = _money(sale.tax)
        discount = subtotal - total
    else:
        discount = _money(sale.discount)
        tax = total - subtotal + discount

    return {
        "subtotal_amount": subtotal,
        "discount_amount": discount,
        "tax_amount": tax,
        "total_amount": total,
    }


class DjangoSaleSink:
    def append(self, sale) -> bool:
        try:
            with transaction.atomic():
                record = Sale.objects.create(
                    id=uuid.UUID(str(sale.id)),
                    staff_id=_existing_pk(Staff, sale.staff_id),
                    staff_name=sale.staff_name,
                    customer_id=_existing_pk(Customer, sale.customer_id),
                    customer_name=sale.customer_name,
                    **_stored_amounts(sale),
                    promotion_code=sale.promotion_code,
                    payment_method=str(sale.payment_method),
                    tax_mode=str(sale.tax_mode),
                    sold_at=sale.timestamp,
                )

                SaleItem.objects.bulk_create(
                    [
                        SaleItem(
                            sale=record,
                            item_id=str(line.item_id),
                            kind=str(line.kind),
                            name=line.name,
                            quantity=int(line.quantity),
                            unit_price=_money(line.unit_price),
                            total_price=_money(line.line_total),
                            position=position,
                        )
                        for position, line in enumerate(sale.lines)
                    ]
                )
        except (DatabaseError, ValueError) as exc:
            raise PersistenceFailure(f"Sale {sale.id} was not saved: {exc}", target="sale") from exc

        logger.info(
            "Sale recorded",
            extra={"sale_id": str(record.id), "invoice_no": record.invoice_no, "total": str(record.total_amount)},
        )
        return True
