"""
PATH: pos/services/checkout_orchestrator.py

CHECKOUT ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Finalize the active cart into an immutable Sale.
- Hand the Sale to the sale sink, forward stock decrements to the inventory sink.
- Clear the cart.

Two-phase policy (local commit, best-effort remote):
- Validation (empty cart, missing staff) runs BEFORE any side effect and raises.
- Once the Sale is built the checkout is complete from the cashier's point of view:
  the customer has paid. Sink failures are caught here, logged, reported on the
  CheckoutResult and published to subscribers. Nothing is rolled back.
- Inventory forwarding runs even when the sale insert failed; each remote call
  is independent.
- Not cancellable once started; timeouts belong to the sinks.

Stock rule:
- new_stock = max(0, catalog_stock - quantity) per product line. Stock may be
  overstated across terminals but never negative.
- The terminal's catalog snapshot is updated with new_stock right away, so
  consecutive sales on one terminal keep decrementing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, List, Optional

from django.conf import settings

from pos.domain import (
    ItemKind,
    PriceBreakdown,
    Sale,
    TaxMode,
    build_sale,
    to_decimal,
)
from pos.exceptions import CheckoutValidationError

logger = logging.getLogger(__name__)

DEFAULT_UNKNOWN_NAME = "Unknown"

SALE_TARGET = "sale"
INVENTORY_TARGET = "inventory"


def unknown_name() -> str:
    return getattr(settings, "POS_UNKNOWN_NAME", DEFAULT_UNKNOWN_NAME) or DEFAULT_UNKNOWN_NAME


def compute_cash_change(amount_received, breakdown: PriceBreakdown) -> Decimal:
    """
    Change due for a cash payment. Negative means the customer is short;
    checkout is not blocked on it (till reconciliation is a human process).
    """
    return to_decimal(amount_received) - breakdown.total


# =====================================================
# RESULT TYPES
# =====================================================


@dataclass(frozen=True)
class StockUpdate:
    product_id: str
    previous_stock: int
    new_stock: int


@dataclass(frozen=True)
class RemoteOutcome:
    target: str
    ok: bool
    sale_id: str
    product_id: Optional[str] = None
    error: str = ""


@dataclass
class CheckoutResult:
    sale: Sale
    outcomes: List[RemoteOutcome] = field(default_factory=list)
    stock_updates: List[StockUpdate] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def sale_saved(self) -> bool:
        return any(o.ok for o in self.outcomes if o.target == SALE_TARGET)

    @property
    def fully_persisted(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failures(self) -> List[RemoteOutcome]:
        return [o for o in self.outcomes if not o.ok]


# =====================================================
# ORCHESTRATOR
# =====================================================


class CheckoutOrchestrator:
    def __init__(self, *, directory, sale_sink, inventory_sink, catalog_index):
        self.directory = directory
        self.sale_sink = sale_sink
        self.inventory_sink = inventory_sink
        self.catalog_index = catalog_index
        self._listeners: List[Callable[[RemoteOutcome], None]] = []

    def subscribe(self, listener: Callable[[RemoteOutcome], None]) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[RemoteOutcome], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -----------------------------
    # Steps
    # -----------------------------

    @staticmethod
    def validate(cart) -> None:
        if cart.is_empty:
            raise CheckoutValidationError("Cart is empty", code=CheckoutValidationError.EMPTY_CART)
        if not (cart.staff_id or "").strip():
            raise CheckoutValidationError(
                "A staff member must be selected", code=CheckoutValidationError.STAFF_REQUIRED
            )

    def _resolve_names(self, cart):
        fallback = unknown_name()

        staff_name = self.directory.resolve_staff_name(cart.staff_id) or fallback

        customer_name = None
        if cart.customer_id:
            customer_name = self.directory.resolve_customer_name(cart.customer_id) or fallback

        return staff_name, customer_name

    def _publish(self, outcome: RemoteOutcome) -> None:
        for listener in list(self._listeners):
            try:
                listener(outcome)
            except Exception:
                logger.exception("Checkout outcome listener failed", extra={"sale_id": outcome.sale_id})

    def _call_remote(self, *, target: str, sale_id: str, func, args, product_id=None) -> RemoteOutcome:
        try:
            ok = func(*args) is not False
            error = "" if ok else f"{target} sink rejected the write"
        except Exception as exc:
            ok = False
            error = str(exc) or exc.__class__.__name__

        if not ok:
            logger.warning(
                "Remote persistence failed",
                extra={"target": target, "sale_id": sale_id, "product_id": product_id, "error": error},
            )

        outcome = RemoteOutcome(target=target, ok=ok, sale_id=sale_id, product_id=product_id, error=error)
        self._publish(outcome)
        return outcome

    def _stock_updates(self, sale: Sale, result: CheckoutResult) -> List[StockUpdate]:
        updates = []
        for line in sale.lines:
            if line.kind != ItemKind.PRODUCT:
                continue

            product = self.catalog_index.find(line.item_id, ItemKind.PRODUCT)
            if product is None:
                result.warnings.append(f"Product {line.item_id} is no longer in the catalog; stock not updated.")
                logger.warning("Sold product missing from catalog", extra={"product_id": line.item_id, "sale_id": sale.id})
                continue

            previous = int(product.stock or 0)
            update = StockUpdate(
                product_id=line.item_id,
                previous_stock=previous,
                new_stock=max(0, previous - line.quantity),
            )
            updates.append(update)

            # local snapshot follows the sale even if the remote write fails
            self.catalog_index.update_stock(update.product_id, update.new_stock)
        return updates

    # -----------------------------
    # Entry point
    # -----------------------------

    def checkout(
        self,
        cart_manager,
        breakdown: PriceBreakdown,
        payment_method: str,
        *,
        tax_mode: str = TaxMode.EXCLUDED,
        reset_staff: bool = False,
    ) -> CheckoutResult:
        cart = cart_manager.cart

        # 0) validation (no side effects before this passes)
        self.validate(cart)

        # 1) name snapshots
        staff_name, customer_name = self._resolve_names(cart)

        # 2) immutable sale (local commit)
        sale = build_sale(
            lines=cart.lines,
            staff_id=cart.staff_id,
            customer_id=cart.customer_id,
            breakdown=breakdown,
            payment_method=payment_method,
            tax_mode=tax_mode,
            staff_name=staff_name,
            customer_name=customer_name,
            promotion_code=cart.promotion_code,
        )
        result = CheckoutResult(sale=sale)

        # 3) sale sink (append-only, best effort)
        outcome = self._call_remote(
            target=SALE_TARGET,
            sale_id=sale.id,
            func=self.sale_sink.append,
            args=(sale,),
        )
        result.outcomes.append(outcome)
        if not outcome.ok:
            result.warnings.append("Transaction completed but failed to save to cloud.")

        # 4) stock decrements (floored at zero), forwarded one product at a time
        result.stock_updates = self._stock_updates(sale, result)
        for update in result.stock_updates:
            outcome = self._call_remote(
                target=INVENTORY_TARGET,
                sale_id=sale.id,
                func=self.inventory_sink.set_stock,
                args=(update.product_id, update.new_stock),
                product_id=update.product_id,
            )
            result.outcomes.append(outcome)
            if not outcome.ok:
                result.warnings.append(f"Stock for product {update.product_id} was not updated.")

        # 5) clear the cart
        cart_manager.clear(reset_staff=reset_staff)

        logger.info(
            "Checkout completed",
            extra={
                "sale_id": sale.id,
                "total": str(sale.total),
                "payment_method": str(sale.payment_method),
                "persisted": result.fully_persisted,
            },
        )
        return result
