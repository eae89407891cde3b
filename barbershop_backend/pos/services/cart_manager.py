"""
PATH: pos/services/cart_manager.py

CART MANAGER

Purpose:
- Own the in-progress Cart for one terminal (in-memory, single-threaded).
- Add / adjust / remove / clear line items, select staff, customer and promo code.

Rules:
- Lines are unique by (item id, kind): re-adding increments quantity.
- Quantity never drops below 1 through adjust_quantity (use remove_item).
- Name + unit price are snapshotted from the catalog item at add time.
- No operation fails; malformed deltas are clamped, unknown lines are no-ops.
"""

from __future__ import annotations

from typing import List, Optional

from pos.domain import Cart, ItemKind, LineItem


class CartManager:
    def __init__(self, cart: Optional[Cart] = None):
        self.cart = cart or Cart()

    # -----------------------------
    # Read helpers
    # -----------------------------

    @property
    def lines(self) -> List[LineItem]:
        return self.cart.lines

    @property
    def is_empty(self) -> bool:
        return self.cart.is_empty

    def find_line(self, item_id, kind) -> Optional[LineItem]:
        key = (str(item_id), str(ItemKind(kind)))
        for line in self.cart.lines:
            if line.key == key:
                return line
        return None

    # -----------------------------
    # Line mutations
    # -----------------------------

    def add_item(self, item, kind=None) -> LineItem:
        kind = ItemKind(kind or item.kind)

        existing = self.find_line(item.id, kind)
        if existing is not None:
            existing.quantity += 1
            return existing

        line = LineItem(
            item_id=str(item.id),
            kind=kind,
            name=item.name,
            unit_price=item.price,
            quantity=1,
        )
        self.cart.lines.append(line)
        return line

    def adjust_quantity(self, item_id, kind, delta: int) -> Optional[LineItem]:
        line = self.find_line(item_id, kind)
        if line is None:
            return None

        try:
            delta = int(delta)
        except (TypeError, ValueError):
            delta = 0

        line.quantity = max(1, line.quantity + delta)
        return line

    def remove_item(self, item_id, kind) -> None:
        key = (str(item_id), str(ItemKind(kind)))
        self.cart.lines = [line for line in self.cart.lines if line.key != key]

    def clear(self, *, reset_staff: bool = False) -> None:
        """
        Empty the cart after checkout, hold or cancel.

        Staff selection survives unless reset_staff is set: an employee working
        their own terminal keeps themselves selected.
        """
        self.cart.lines = []
        self.cart.customer_id = None
        self.cart.promotion_code = None
        if reset_staff:
            self.cart.staff_id = None

    def load(self, lines, *, staff_id=None, customer_id=None) -> None:
        """
        Replace the active lines (held-sale resume).

        Staff/customer are only overwritten when the snapshot carries them.
        """
        self.cart.lines = [
            LineItem(
                item_id=line.item_id,
                kind=line.kind,
                name=line.name,
                unit_price=line.unit_price,
                quantity=line.quantity,
            )
            for line in lines
        ]
        if customer_id:
            self.cart.customer_id = customer_id
        if staff_id:
            self.cart.staff_id = staff_id

    # -----------------------------
    # Selections
    # -----------------------------

    def set_staff(self, staff_id) -> None:
        self.cart.staff_id = staff_id or None

    def set_customer(self, customer_id) -> None:
        self.cart.customer_id = customer_id or None

    def set_promotion_code(self, code) -> None:
        self.cart.promotion_code = code or None
