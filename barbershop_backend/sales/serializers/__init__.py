from .expense import ExpenseCreateSerializer, ExpenseSerializer
from .sale import SaleSerializer
from .sale_item import SaleItemSerializer

__all__ = [
    "ExpenseCreateSerializer",
    "ExpenseSerializer",
    "SaleItemSerializer",
    "SaleSerializer",
]
