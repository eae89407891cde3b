from .catalog_item import CatalogItemSerializer
from .product import ProductSerializer
from .service import ServiceSerializer

__all__ = [
    "CatalogItemSerializer",
    "ProductSerializer",
    "ServiceSerializer",
]
