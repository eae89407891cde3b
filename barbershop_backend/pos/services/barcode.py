"""
PATH: pos/services/barcode.py

BARCODE RESOLUTION

Exact match of a scanned code against product barcodes.

- miss -> BarcodeNotFound (soft, the scan session continues)
- blank / unreadable payload -> ScannerFailure
"""

from __future__ import annotations

import logging

from pos.domain import ProductItem
from pos.exceptions import BarcodeNotFound, ScannerFailure

logger = logging.getLogger(__name__)


def normalize_scan(code) -> str:
    if code is None:
        raise ScannerFailure("Scanner returned no data")
    value = str(code).strip()
    if not value:
        raise ScannerFailure("Scanner returned an empty code")
    return value


class BarcodeResolver:
    def __init__(self, catalog_index):
        self.catalog_index = catalog_index

    def resolve(self, code) -> ProductItem:
        value = normalize_scan(code)

        product = self.catalog_index.product_by_barcode(value)
        if product is None:
            logger.info("Barcode not found", extra={"barcode": value})
            raise BarcodeNotFound(value)
        return product
