"""
PATH: pos/services/wiring.py

TERMINAL WIRING (DJANGO COLLABORATORS)

Purpose:
- Assemble a TerminalSession over the Django-backed collaborators:
  catalog (catalog app), directory (directory app), promotions/tax (shop app),
  sale sink (sales app), held sales (configured durable local store).
- Load a posted cart payload into the session, re-pricing every line from the
  catalog (clients never send prices).
"""

from __future__ import annotations

from catalog.services import DjangoCatalogSource, DjangoInventorySink
from directory.services import DjangoDirectorySource
from pos.exceptions import UnknownCatalogItem
from pos.services.catalog_index import CatalogIndex
from pos.services.checkout_orchestrator import CheckoutOrchestrator
from pos.services.held_sales import HeldSaleStore
from pos.services.storage import build_storage
from pos.services.terminal import TerminalSession
from sales.services import DjangoSaleSink
from shop.services import load_pricing_config


def build_held_sale_store() -> HeldSaleStore:
    return HeldSaleStore(build_storage())


def build_terminal_session(*, held_sales=None) -> TerminalSession:
    catalog_index = CatalogIndex.from_source(DjangoCatalogSource())
    promotions, tax_policy = load_pricing_config()

    orchestrator = CheckoutOrchestrator(
        directory=DjangoDirectorySource(),
        sale_sink=DjangoSaleSink(),
        inventory_sink=DjangoInventorySink(),
        catalog_index=catalog_index,
    )

    return TerminalSession(
        catalog_index=catalog_index,
        held_sales=held_sales if held_sales is not None else build_held_sale_store(),
        orchestrator=orchestrator,
        promotions=promotions,
        tax_policy=tax_policy,
    )


def load_cart_payload(session: TerminalSession, payload: dict) -> None:
    """
    payload: validated CartPayloadSerializer data.
    Repeated (id, kind) entries accumulate, same as re-adding on the terminal.
    """
    for entry in payload.get("items") or []:
        item_id, kind = entry["id"], entry["kind"]
        if session.add_item(item_id, kind) is None:
            raise UnknownCatalogItem(item_id, kind)

        extra = int(entry.get("quantity") or 1) - 1
        if extra:
            session.adjust_quantity(item_id, kind, extra)

    session.select_staff((payload.get("staff_id") or "").strip() or None)
    session.select_customer((payload.get("customer_id") or "").strip() or None)
    session.apply_promotion_code(payload.get("promotion_code"))
