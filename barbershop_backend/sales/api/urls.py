# sales/api/urls.py

"""
SALES API URLS

Rules:
- Explicit non-PK routes (like "reports/...") MUST be registered BEFORE router URLs,
  otherwise the router will treat "reports" as a <pk>.

Provides:
    GET /api/sales/                        (list)
    GET /api/sales/<uuid>/                 (retrieve)
    GET /api/sales/reports/summary/        (admin)
    GET /api/sales/reports/commissions/    (admin)
    GET/POST /api/sales/expenses/          (list / record)
    DELETE /api/sales/expenses/<uuid>/     (admin)
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from sales.api.expenses import ExpenseDetailView, ExpenseListCreateView
from sales.api.reports import CommissionReportView, SalesSummaryReportView
from sales.api.viewsets import SaleViewSet

app_name = "sales"

router = SimpleRouter()
router.register(r"", SaleViewSet, basename="sales")

urlpatterns = [
    path("reports/summary/", SalesSummaryReportView.as_view(), name="reports-summary"),
    path("reports/commissions/", CommissionReportView.as_view(), name="reports-commissions"),
    path("expenses/", ExpenseListCreateView.as_view(), name="expenses"),
    path("expenses/<uuid:pk>/", ExpenseDetailView.as_view(), name="expense-detail"),
    path("", include(router.urls)),
]
