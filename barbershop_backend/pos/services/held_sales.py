"""
PATH: pos/services/held_sales.py

HELD-SALE STORE (PARKED TRANSACTIONS)

Purpose:
- Park the current cart so the terminal can serve another customer.
- Survive process restarts via an injected durable local storage backend.

Rules:
- Mutations re-read the collection under the storage lock, then rewrite it IN FULL.
- Reads (list, get, len) always reflect storage, not a stale copy.
- Newest hold first.
- Absent or corrupt storage -> empty collection (logged), never an exception.
- No network I/O: parked carts must survive a dropped connection.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import List, Optional

from django.conf import settings
from django.utils import timezone

from pos.domain import Cart, HeldSale, new_hold_id
from pos.exceptions import HeldSaleNotFound, StorageCorrupted

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "barbershop_pos.held_sales"


def default_storage_key() -> str:
    return getattr(settings, "POS_HELD_SALES_KEY", DEFAULT_STORAGE_KEY) or DEFAULT_STORAGE_KEY


class HeldSaleStore:
    def __init__(self, storage, *, key: Optional[str] = None):
        self.storage = storage
        self.key = key or default_storage_key()
        self._held: List[HeldSale] = self._load()

    # -----------------------------
    # Persistence
    # -----------------------------

    def _load(self) -> List[HeldSale]:
        try:
            raw = self.storage.read_all(self.key)
        except StorageCorrupted as exc:
            logger.warning("Held sales storage unreadable; starting empty", extra={"key": self.key, "error": str(exc)})
            return []

        if raw is None:
            return []

        if not isinstance(raw, list):
            logger.warning("Held sales storage has unexpected shape; starting empty", extra={"key": self.key})
            return []

        try:
            return [HeldSale.from_dict(entry) for entry in raw]
        except StorageCorrupted as exc:
            logger.warning("Held sales storage corrupt; starting empty", extra={"key": self.key, "error": str(exc)})
            return []

    def _persist(self) -> None:
        self.storage.write_all(self.key, [held.to_dict() for held in self._held])

    @contextmanager
    def _locked(self):
        # Other terminals may have written since our last read.
        with self.storage.lock(self.key):
            self._held = self._load()
            yield

    def _find(self, hold_id: str) -> Optional[HeldSale]:
        for held in self._held:
            if held.id == hold_id:
                return held
        return None

    # -----------------------------
    # Operations
    # -----------------------------

    def refresh(self) -> None:
        self._held = self._load()

    def list(self) -> List[HeldSale]:
        self.refresh()
        return list(self._held)

    def __len__(self) -> int:
        self.refresh()
        return len(self._held)

    def get(self, hold_id: str) -> Optional[HeldSale]:
        self.refresh()
        return self._find(hold_id)

    def hold(self, cart: Cart) -> HeldSale:
        held = HeldSale(
            id=new_hold_id(),
            timestamp=timezone.now(),
            lines=tuple(cart.snapshot_lines()),
            customer_id=cart.customer_id or None,
            staff_id=cart.staff_id or None,
        )
        with self._locked():
            self._held.insert(0, held)
            self._persist()

        logger.info("Sale held", extra={"hold_id": held.id, "lines": len(held.lines)})
        return held

    def resume(self, hold_id: str) -> HeldSale:
        with self._locked():
            held = self._find(hold_id)
            if held is None:
                raise HeldSaleNotFound(f"Held sale {hold_id} not found")

            self._held = [h for h in self._held if h.id != hold_id]
            self._persist()
        return held

    def discard(self, hold_id: str) -> None:
        with self._locked():
            if self._find(hold_id) is None:
                raise HeldSaleNotFound(f"Held sale {hold_id} not found")

            self._held = [h for h in self._held if h.id != hold_id]
            self._persist()
        logger.info("Held sale discarded", extra={"hold_id": hold_id})
