from .catalog_source import DjangoCatalogSource
from .inventory import DjangoInventorySink, low_stock_products

__all__ = [
    "DjangoCatalogSource",
    "DjangoInventorySink",
    "low_stock_products",
]
