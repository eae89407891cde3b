# catalog/services/inventory.py

"""
======================================================
PATH: catalog/services/inventory.py
======================================================
INVENTORY SERVICES

Purpose:
- Inventory sink for the POS core: persist a product's new on-hand count.
- Low-stock listing for the back office.

Rules:
- Stock values are non-negative integers.
- The POS core computes the new value (client-computed, no compare-and-swap);
  two terminals selling the same product converge only on reload.
- Failures surface as PersistenceFailure(target="inventory").
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from catalog.models import Product
from pos.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


def _to_stock(value) -> int:
    if isinstance(value, bool):
        raise ValueError("stock must be an integer")
    stock = int(value)
    if stock < 0:
        raise ValueError("stock cannot be negative")
    return stock


class DjangoInventorySink:
    def set_stock(self, product_id, new_stock) -> bool:
        stock = _to_stock(new_stock)

        try:
            with transaction.atomic():
                updated = Product.objects.filter(pk=product_id).update(stock=stock)
        except (DatabaseError, ValidationError) as exc:
            raise PersistenceFailure(f"Stock update failed for {product_id}: {exc}", target="inventory") from exc

        if not updated:
            logger.warning("Stock update matched no product", extra={"product_id": str(product_id)})
            return False

        return True


def low_stock_products():
    """
    Active products at or below their threshold (default POS_LOW_STOCK_DEFAULT).
    """
    products = Product.objects.filter(is_active=True).order_by("stock", "name")
    return [p for p in products if p.is_low_stock]
