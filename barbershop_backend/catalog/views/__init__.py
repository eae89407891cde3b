# catalog/views/__init__.py

"""
Catalog views package exports.
"""

from .catalog import BarcodeLookupView, CatalogSearchView
from .product import ProductViewSet
from .service import ServiceViewSet

__all__ = [
    "BarcodeLookupView",
    "CatalogSearchView",
    "ProductViewSet",
    "ServiceViewSet",
]
