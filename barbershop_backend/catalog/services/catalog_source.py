# catalog/services/catalog_source.py

"""
CATALOG SOURCE (DJANGO-BACKED)

Purpose:
- Load active services/products once and hand them to the POS core as
  immutable snapshots (pos.domain.ServiceItem / ProductItem).

Rules:
- Inactive rows are never offered for sale.
- Snapshot ids are strings (UUID text).
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from catalog.models import Product, Service
from pos.domain import ProductItem, ServiceItem


def service_snapshot(service: Service) -> ServiceItem:
    return ServiceItem(
        id=str(service.id),
        name=service.name,
        price=Decimal(service.price),
        duration=int(service.duration_minutes or 0),
        category=service.category or "",
    )


def product_snapshot(product: Product) -> ProductItem:
    return ProductItem(
        id=str(product.id),
        name=product.name,
        price=Decimal(product.price),
        cost=Decimal(product.cost or 0),
        stock=int(product.stock or 0),
        barcode=(product.barcode or None),
        low_stock_threshold=product.low_stock_threshold,
    )


class DjangoCatalogSource:
    def list_services(self) -> List[ServiceItem]:
        return [service_snapshot(s) for s in Service.objects.filter(is_active=True)]

    def list_products(self) -> List[ProductItem]:
        return [product_snapshot(p) for p in Product.objects.filter(is_active=True)]
