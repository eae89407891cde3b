"""
PATH: pos/services/terminal.py

TERMINAL SESSION

Purpose:
- One terminal's transaction lifecycle, composing the catalog index, cart manager,
  pricing engine, held-sale store and checkout orchestrator.

State machine:
    EMPTY    --add_item/scan-->  BUILDING
    BUILDING --hold-->           EMPTY (cart becomes a HeldSale)
    BUILDING --checkout ok-->    COMPLETED --next mutation/cancel--> EMPTY/BUILDING
    BUILDING --checkout invalid--> BUILDING (error raised, nothing changed)
    EMPTY/BUILDING --resume-->   BUILDING (a non-empty active cart that was not
                                  held first is overwritten; logged, not prevented)

The breakdown is recomputed in full on every read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from pos.domain import ItemKind, PaymentMethod, PriceBreakdown, Sale, TaxPolicy
from pos.exceptions import BarcodeNotFound, CheckoutValidationError
from pos.services.barcode import BarcodeResolver
from pos.services.cart_manager import CartManager
from pos.services.checkout_orchestrator import CheckoutResult, compute_cash_change
from pos.services.pricing import compute_breakdown

logger = logging.getLogger(__name__)


class TerminalState:
    EMPTY = "EMPTY"
    BUILDING = "BUILDING"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class ScanResult:
    status: str
    code: str
    product: Optional[object] = None
    message: str = ""

    ADDED = "added"
    NOT_FOUND = "not_found"

    @property
    def found(self) -> bool:
        return self.status == self.ADDED


class TerminalSession:
    def __init__(
        self,
        *,
        catalog_index,
        held_sales,
        orchestrator,
        promotions=(),
        tax_policy: Optional[TaxPolicy] = None,
        operator_is_employee: bool = False,
        operator_staff_id: Optional[str] = None,
    ):
        self.catalog_index = catalog_index
        self.held_sales = held_sales
        self.orchestrator = orchestrator
        self.promotions = list(promotions)
        self.tax_policy = tax_policy or TaxPolicy.none()

        self.operator_is_employee = operator_is_employee
        self.cart_manager = CartManager()
        if operator_is_employee and operator_staff_id:
            self.cart_manager.set_staff(operator_staff_id)

        self.barcodes = BarcodeResolver(catalog_index)
        self.last_sale: Optional[Sale] = None
        self.last_result: Optional[CheckoutResult] = None
        self.last_change = None
        self._completed = False

    # -----------------------------
    # State
    # -----------------------------

    @property
    def state(self) -> str:
        if not self.cart_manager.is_empty:
            return TerminalState.BUILDING
        if self._completed:
            return TerminalState.COMPLETED
        return TerminalState.EMPTY

    @property
    def cart(self):
        return self.cart_manager.cart

    @property
    def breakdown(self) -> PriceBreakdown:
        return compute_breakdown(self.cart, self.promotions, self.tax_policy)

    def refresh_config(self, *, promotions=None, tax_policy: Optional[TaxPolicy] = None) -> None:
        if promotions is not None:
            self.promotions = list(promotions)
        if tax_policy is not None:
            self.tax_policy = tax_policy

    def _touch(self) -> None:
        self._completed = False

    # -----------------------------
    # Cart operations
    # -----------------------------

    def add_item(self, item_id, kind):
        item = self.catalog_index.find(item_id, kind)
        if item is None:
            return None
        self._touch()
        return self.cart_manager.add_item(item, kind)

    def adjust_quantity(self, item_id, kind, delta: int):
        return self.cart_manager.adjust_quantity(item_id, kind, delta)

    def remove_item(self, item_id, kind) -> None:
        self.cart_manager.remove_item(item_id, kind)

    def select_staff(self, staff_id) -> None:
        self.cart_manager.set_staff(staff_id)

    def select_customer(self, customer_id) -> None:
        self.cart_manager.set_customer(customer_id)

    def apply_promotion_code(self, code) -> None:
        self.cart_manager.set_promotion_code((code or "").strip().upper() or None)

    def cancel(self) -> None:
        self._touch()
        self.cart_manager.clear(reset_staff=not self.operator_is_employee)

    def scan(self, code) -> ScanResult:
        try:
            product = self.barcodes.resolve(code)
        except BarcodeNotFound as exc:
            return ScanResult(status=ScanResult.NOT_FOUND, code=exc.code, message=f"Unknown product: {exc.code}")

        self._touch()
        self.cart_manager.add_item(product, ItemKind.PRODUCT)
        return ScanResult(status=ScanResult.ADDED, code=product.barcode, product=product, message=f"Added: {product.name}")

    # -----------------------------
    # Held sales
    # -----------------------------

    def hold(self):
        if self.cart_manager.is_empty:
            raise CheckoutValidationError("Nothing to hold", code=CheckoutValidationError.EMPTY_CART)

        held = self.held_sales.hold(self.cart)
        self.cart_manager.clear(reset_staff=not self.operator_is_employee)
        self._touch()
        return held

    def resume(self, hold_id: str):
        held = self.held_sales.resume(hold_id)

        if not self.cart_manager.is_empty:
            logger.info(
                "Resumed held sale over a non-empty cart",
                extra={"hold_id": hold_id, "discarded_lines": len(self.cart_manager.lines)},
            )

        self._touch()
        self.cart_manager.load(held.lines, staff_id=held.staff_id, customer_id=held.customer_id)
        return held

    def discard(self, hold_id: str) -> None:
        self.held_sales.discard(hold_id)

    def held(self) -> List:
        return self.held_sales.list()

    # -----------------------------
    # Checkout
    # -----------------------------

    def cash_change(self, amount_received):
        return compute_cash_change(amount_received, self.breakdown)

    def checkout(self, payment_method: str = PaymentMethod.CASH, amount_received=None) -> CheckoutResult:
        # change is priced before the cart is cleared
        change = None
        if amount_received is not None and payment_method == PaymentMethod.CASH:
            change = self.cash_change(amount_received)

        result = self.orchestrator.checkout(
            self.cart_manager,
            self.breakdown,
            payment_method,
            tax_mode=self.tax_policy.mode,
            reset_staff=not self.operator_is_employee,
        )
        self.last_sale = result.sale
        self.last_result = result
        self.last_change = change
        self._completed = True
        return result
