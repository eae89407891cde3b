"""
PATH: catalog/models/__init__.py

Catalog models export surface.
"""

from .product import Product
from .service import Service

__all__ = [
    "Product",
    "Service",
]
