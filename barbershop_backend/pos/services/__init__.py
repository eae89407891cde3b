from .cart_manager import CartManager
from .catalog_index import CatalogIndex
from .checkout_orchestrator import CheckoutOrchestrator, CheckoutResult, compute_cash_change
from .held_sales import HeldSaleStore
from .pricing import compute_breakdown

__all__ = [
    "CartManager",
    "CatalogIndex",
    "CheckoutOrchestrator",
    "CheckoutResult",
    "compute_cash_change",
    "HeldSaleStore",
    "compute_breakdown",
]
