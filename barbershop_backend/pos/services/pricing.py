"""
PATH: pos/services/pricing.py

PRICING ENGINE

Purpose:
- Derive subtotal / discount / tax / total from a cart, the shop's promotion codes
  and its tax policy.

Rules:
- Pure function: no state, no I/O, identical inputs -> identical outputs.
- Always rebuilt in full from the cart (never patched incrementally).
- Promotion lookup is an exact (case-sensitive) code match; callers upper-case
  the code at entry time.
- Fixed discounts are NOT clamped to the subtotal: a fixed amount larger than the
  subtotal yields a negative discounted amount (and total).
- Tax "included": total is the discounted amount, tax is backed out for reporting.
  Tax "excluded": tax is added on top.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from pos.domain import (
    ZERO,
    Cart,
    DiscountKind,
    PriceBreakdown,
    PromotionCode,
    TaxMode,
    TaxPolicy,
    to_decimal,
)

HUNDRED = Decimal("100")


def subtotal_of(lines) -> Decimal:
    return sum((line.unit_price * Decimal(line.quantity) for line in lines), ZERO)


def find_promotion(code: Optional[str], promotions: Iterable[PromotionCode]) -> Optional[PromotionCode]:
    if not code:
        return None
    for promo in promotions or ():
        if promo.code == code:
            return promo
    return None


def discount_for(promotion: Optional[PromotionCode], subtotal: Decimal) -> Decimal:
    if promotion is None:
        return ZERO

    value = to_decimal(promotion.value)
    if promotion.kind == DiscountKind.PERCENTAGE:
        return subtotal * value / HUNDRED
    return value


def compute_breakdown(
    cart: Cart,
    promotions: Iterable[PromotionCode],
    tax_policy: TaxPolicy,
) -> PriceBreakdown:
    subtotal = subtotal_of(cart.lines)
    discount = discount_for(find_promotion(cart.promotion_code, promotions), subtotal)
    discounted_amount = subtotal - discount

    rate = to_decimal(tax_policy.rate)

    if tax_policy.mode == TaxMode.INCLUDED:
        total = discounted_amount
        tax = total - (total / (1 + rate / HUNDRED))
    else:
        tax = discounted_amount * (rate / HUNDRED)
        total = discounted_amount + tax

    return PriceBreakdown(subtotal=subtotal, discount=discount, tax=tax, total=total)
