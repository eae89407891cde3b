# shop/services/pricing_config.py

"""
PROMOTION / TAX CONFIG SOURCE

Purpose:
- Hand the pricing engine its inputs: active promotion codes and the tax policy.
- Read per request so edits in the admin apply to the next quote.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Tuple

from pos.domain import DiscountKind, PromotionCode as PromotionSnapshot, TaxPolicy
from shop.models import PromotionCode, ShopSettings


def promotion_snapshot(promo: PromotionCode) -> PromotionSnapshot:
    return PromotionSnapshot(
        code=promo.code,
        kind=DiscountKind(promo.kind),
        value=Decimal(promo.value),
        description=promo.description or "",
    )


class DjangoPricingConfigSource:
    def list_promotions(self) -> List[PromotionSnapshot]:
        return [promotion_snapshot(p) for p in PromotionCode.objects.filter(is_active=True)]

    def tax_policy(self) -> TaxPolicy:
        return ShopSettings.load().tax_policy()


def load_pricing_config() -> Tuple[List[PromotionSnapshot], TaxPolicy]:
    source = DjangoPricingConfigSource()
    return source.list_promotions(), source.tax_policy()
