from .expense_service import ExpenseError, delete_expense, record_expense, total_expenses
from .report_service import commission_report, sales_summary
from .sale_service import DjangoSaleSink

__all__ = [
    "DjangoSaleSink",
    "ExpenseError",
    "commission_report",
    "delete_expense",
    "record_expense",
    "sales_summary",
    "total_expenses",
]
