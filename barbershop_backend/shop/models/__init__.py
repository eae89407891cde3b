from .promotion import PromotionCode
from .settings import ShopSettings

__all__ = [
    "PromotionCode",
    "ShopSettings",
]
