# pos/serializers/__init__.py

from .cart import (
    CartLineInputSerializer,
    CartPayloadSerializer,
    CheckoutInputSerializer,
)
from .outputs import (
    CheckoutResultSerializer,
    HeldSaleSerializer,
    LineItemSerializer,
    PriceBreakdownSerializer,
    QuoteSerializer,
)

__all__ = [
    "CartLineInputSerializer",
    "CartPayloadSerializer",
    "CheckoutInputSerializer",
    "CheckoutResultSerializer",
    "HeldSaleSerializer",
    "LineItemSerializer",
    "PriceBreakdownSerializer",
    "QuoteSerializer",
]
