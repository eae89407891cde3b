"""
PATH: pos/exceptions.py

POS CORE ERRORS

Centralized domain errors for the POS transaction engine.

Blocking vs non-blocking:
- CheckoutValidationError is raised BEFORE any side effect.
- PersistenceFailure is never raised out of checkout; it is recorded on the result.
- BarcodeNotFound is a soft signal (scan miss), ScannerFailure ends a scan session.
"""


class POSError(Exception):
    """Base exception for all POS core failures."""


class CheckoutValidationError(POSError):
    """Raised when a cart cannot be finalized (empty cart, missing staff)."""

    EMPTY_CART = "EMPTY_CART"
    STAFF_REQUIRED = "STAFF_REQUIRED"
    INVALID_PAYMENT_METHOD = "INVALID_PAYMENT_METHOD"

    def __init__(self, message: str, *, code: str):
        super().__init__(message)
        self.code = code


class PersistenceFailure(POSError):
    """Raised by a remote sink when a write fails or times out."""

    def __init__(self, message: str, *, target: str):
        super().__init__(message)
        self.target = target


class BarcodeNotFound(POSError):
    """Scanned code does not match any product barcode."""

    def __init__(self, code: str):
        super().__init__(f"Unknown product: {code}")
        self.code = code


class ScannerFailure(POSError):
    """Scan payload unusable or scanner device unavailable."""


class HeldSaleNotFound(POSError):
    """Held sale id is not in the parked collection."""


class StorageCorrupted(POSError):
    """Durable held-sale payload could not be decoded."""


class UnknownCatalogItem(POSError):
    """A cart payload names an item that is not in the active catalog."""

    def __init__(self, item_id: str, kind: str):
        super().__init__(f"Unknown {kind}: {item_id}")
        self.item_id = item_id
        self.kind = kind


class StorageUnavailable(POSError):
    """Held-sale storage lock could not be acquired in time."""
