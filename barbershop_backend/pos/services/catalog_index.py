"""
PATH: pos/services/catalog_index.py

CATALOG INDEX (READ-ONLY)

Purpose:
- Lookup of sellable items by (id, kind) and free-text search for the POS grid.
- Built from an already-loaded Catalog Source snapshot; no I/O here.

Search rules (case-insensitive substring):
- services: name or category
- products: name or barcode
- empty query returns everything of the requested kind(s)
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from pos.domain import ItemKind, ProductItem, ServiceItem


class CatalogIndex:
    def __init__(self, services=(), products=()):
        self.services: List[ServiceItem] = list(services)
        self.products: List[ProductItem] = list(products)

        self._by_key: Dict[Tuple[str, str], object] = {}
        for item in self.services:
            self._by_key[(str(item.id), ItemKind.SERVICE.value)] = item
        for item in self.products:
            self._by_key[(str(item.id), ItemKind.PRODUCT.value)] = item

    @classmethod
    def from_source(cls, source) -> "CatalogIndex":
        return cls(services=source.list_services(), products=source.list_products())

    def find(self, item_id, kind):
        try:
            kind = ItemKind(kind)
        except ValueError:
            return None
        return self._by_key.get((str(item_id), kind.value))

    def search(self, query: Optional[str] = "", kind=None) -> list:
        needle = (query or "").strip().lower()
        kind = ItemKind(kind) if kind else None

        results = []
        if kind in (None, ItemKind.SERVICE):
            results.extend(
                s for s in self.services
                if not needle or needle in s.name.lower() or needle in (s.category or "").lower()
            )
        if kind in (None, ItemKind.PRODUCT):
            results.extend(
                p for p in self.products
                if not needle or needle in p.name.lower() or needle in (p.barcode or "").lower()
            )
        return results

    def product_by_barcode(self, code: str) -> Optional[ProductItem]:
        for product in self.products:
            if product.barcode and product.barcode == code:
                return product
        return None

    def update_stock(self, product_id, stock: int) -> Optional[ProductItem]:
        """
        Replace a product snapshot with its post-sale stock so the next
        checkout on this terminal decrements from the new count.
        """
        key = (str(product_id), ItemKind.PRODUCT.value)
        current = self._by_key.get(key)
        if current is None:
            return None

        updated = replace(current, stock=int(stock))
        self._by_key[key] = updated
        self.products = [updated if p is current else p for p in self.products]
        return updated
