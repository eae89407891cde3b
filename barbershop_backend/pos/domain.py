"""
PATH: pos/domain.py

POS DOMAIN TYPES

Purpose:
- Plain value objects for the transaction engine (no ORM, no I/O).
- Catalog variants (ServiceItem / ProductItem) are read-only snapshots supplied
  by the catalog collaborator.
- Cart + LineItem are the mutable in-progress transaction.
- HeldSale + Sale are immutable snapshots.

Rules:
- Money is Decimal; nothing is rounded inside the core.
- LineItem.quantity >= 1 (enforced by CartManager).
- A Sale can only be constructed through build_sale() (validates before creating).
"""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from django.db import models
from django.utils import timezone

from pos.exceptions import CheckoutValidationError, StorageCorrupted

ZERO = Decimal("0")
DEFAULT_LOW_STOCK_THRESHOLD = 15


def to_decimal(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# =====================================================
# ENUMS
# =====================================================


class ItemKind(models.TextChoices):
    SERVICE = "service", "Service"
    PRODUCT = "product", "Product"


class DiscountKind(models.TextChoices):
    PERCENTAGE = "percentage", "Percentage"
    FIXED = "fixed", "Fixed amount"


class TaxMode(models.TextChoices):
    INCLUDED = "included", "Included in prices"
    EXCLUDED = "excluded", "Added on top"


class PaymentMethod(models.TextChoices):
    CASH = "cash", "Cash"
    CARD = "card", "Card"
    WALLET = "wallet", "Wallet"


# =====================================================
# CATALOG SNAPSHOTS
# =====================================================


@dataclass(frozen=True)
class ServiceItem:
    id: str
    name: str
    price: Decimal
    duration: int = 0
    category: str = ""

    kind = ItemKind.SERVICE


@dataclass(frozen=True)
class ProductItem:
    id: str
    name: str
    price: Decimal
    cost: Decimal = ZERO
    stock: int = 0
    barcode: Optional[str] = None
    low_stock_threshold: Optional[int] = None

    kind = ItemKind.PRODUCT

    @property
    def is_low_stock(self) -> bool:
        threshold = self.low_stock_threshold or DEFAULT_LOW_STOCK_THRESHOLD
        return self.stock <= threshold


# =====================================================
# PRICING INPUTS
# =====================================================


@dataclass(frozen=True)
class PromotionCode:
    code: str
    kind: str
    value: Decimal
    description: str = ""


@dataclass(frozen=True)
class TaxPolicy:
    """
    rate: percentage 0..100
    mode: "included" (embedded in prices) or "excluded" (added on top)
    """

    rate: Decimal
    mode: str = TaxMode.EXCLUDED

    @classmethod
    def none(cls) -> "TaxPolicy":
        return cls(rate=ZERO, mode=TaxMode.EXCLUDED)


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal

    @property
    def discounted_amount(self) -> Decimal:
        return self.subtotal - self.discount

    def to_dict(self) -> dict:
        return {
            "subtotal": str(self.subtotal),
            "discount": str(self.discount),
            "tax": str(self.tax),
            "total": str(self.total),
        }


# =====================================================
# CART
# =====================================================


@dataclass
class LineItem:
    item_id: str
    kind: str
    name: str
    unit_price: Decimal
    quantity: int = 1

    @property
    def key(self) -> Tuple[str, str]:
        return (self.item_id, str(self.kind))

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * Decimal(self.quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.item_id,
            "kind": str(self.kind),
            "name": self.name,
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
        }

    @staticmethod
    def from_dict(raw: dict) -> "LineItem":
        if not isinstance(raw, dict):
            raise StorageCorrupted("line item must be an object")
        try:
            kind = ItemKind(raw["kind"])
            quantity = int(raw["quantity"])
            return LineItem(
                item_id=str(raw["id"]),
                kind=kind,
                name=str(raw.get("name") or ""),
                unit_price=to_decimal(raw["unit_price"]),
                quantity=max(1, quantity),
            )
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise StorageCorrupted(f"malformed line item: {raw!r}") from exc


@dataclass
class Cart:
    lines: List[LineItem] = field(default_factory=list)
    staff_id: Optional[str] = None
    customer_id: Optional[str] = None
    promotion_code: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def snapshot_lines(self) -> List[LineItem]:
        return copy.deepcopy(self.lines)


# =====================================================
# HELD SALE
# =====================================================


def new_hold_id() -> str:
    return uuid.uuid4().hex[:9].upper()


@dataclass(frozen=True)
class HeldSale:
    id: str
    timestamp: datetime
    lines: Tuple[LineItem, ...]
    customer_id: Optional[str] = None
    staff_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "cart": [line.to_dict() for line in self.lines],
            "customer_id": self.customer_id,
            "staff_id": self.staff_id,
        }

    @staticmethod
    def from_dict(raw: dict) -> "HeldSale":
        if not isinstance(raw, dict):
            raise StorageCorrupted("held sale must be an object")

        hold_id = str(raw.get("id") or "").strip()
        if not hold_id:
            raise StorageCorrupted("held sale id is required")

        raw_lines = raw.get("cart")
        if not isinstance(raw_lines, list):
            raise StorageCorrupted(f"held sale {hold_id} has no cart")

        try:
            timestamp = datetime.fromisoformat(str(raw.get("timestamp")))
        except ValueError as exc:
            raise StorageCorrupted(f"held sale {hold_id} has a bad timestamp") from exc

        return HeldSale(
            id=hold_id,
            timestamp=timestamp,
            lines=tuple(LineItem.from_dict(r) for r in raw_lines),
            customer_id=raw.get("customer_id") or None,
            staff_id=raw.get("staff_id") or None,
        )


# =====================================================
# SALE
# =====================================================


@dataclass(frozen=True)
class Sale:
    """
    Immutable record of a completed checkout.

    Name snapshots (staff_name / customer_name) are taken at sale time so later
    renames do not rewrite history.
    """

    id: str
    timestamp: datetime
    lines: Tuple[LineItem, ...]
    staff_id: str
    customer_id: Optional[str]
    subtotal: Decimal
    discount: Decimal
    tax: Decimal
    total: Decimal
    promotion_code: Optional[str]
    payment_method: str
    tax_mode: str
    staff_name: str
    customer_name: Optional[str] = None

    @property
    def product_lines(self) -> Tuple[LineItem, ...]:
        return tuple(line for line in self.lines if line.kind == ItemKind.PRODUCT)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "items": [line.to_dict() for line in self.lines],
            "staff_id": self.staff_id,
            "customer_id": self.customer_id,
            "subtotal": str(self.subtotal),
            "discount": str(self.discount),
            "tax": str(self.tax),
            "total": str(self.total),
            "promotion_code": self.promotion_code,
            "payment_method": str(self.payment_method),
            "tax_mode": str(self.tax_mode),
            "staff_name": self.staff_name,
            "customer_name": self.customer_name,
        }


def build_sale(
    *,
    lines,
    staff_id: Optional[str],
    customer_id: Optional[str],
    breakdown: PriceBreakdown,
    payment_method: str,
    tax_mode: str,
    staff_name: str,
    customer_name: Optional[str] = None,
    promotion_code: Optional[str] = None,
    sale_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> Sale:
    """
    The only way to construct a Sale.

    Validates required fields first so a partially-filled record never exists.
    """
    lines = tuple(copy.deepcopy(list(lines or [])))

    if not lines:
        raise CheckoutValidationError(
            "Cart is empty", code=CheckoutValidationError.EMPTY_CART
        )

    if not (staff_id or "").strip():
        raise CheckoutValidationError(
            "A staff member must be selected", code=CheckoutValidationError.STAFF_REQUIRED
        )

    try:
        method = PaymentMethod(payment_method)
    except ValueError:
        raise CheckoutValidationError(
            f"Unsupported payment method: {payment_method!r}",
            code=CheckoutValidationError.INVALID_PAYMENT_METHOD,
        )

    return Sale(
        id=sale_id or str(uuid.uuid4()),
        timestamp=timestamp or timezone.now(),
        lines=lines,
        staff_id=staff_id,
        customer_id=customer_id or None,
        subtotal=breakdown.subtotal,
        discount=breakdown.discount,
        tax=breakdown.tax,
        total=breakdown.total,
        promotion_code=promotion_code or None,
        payment_method=method,
        tax_mode=TaxMode(tax_mode),
        staff_name=staff_name,
        customer_name=customer_name,
    )
