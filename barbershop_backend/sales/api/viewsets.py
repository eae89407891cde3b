# sales/api/viewsets.py

"""
======================================================
PATH: sales/api/viewsets.py
======================================================
SALE VIEWSET (STAFF)

Purpose:
- "Sales History" API: list + retrieve with basic filters.

Rules:
- Read-only; sales are written only by the POS checkout.
- Filters: payment_method, staff, start/end (YYYY-MM-DD, inclusive).
======================================================
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from sales.models import Sale
from sales.serializers import SaleSerializer
from sales.serializers.sale import ReportPeriodQuerySerializer
from sales.services.report_service import sales_in_period


@extend_schema_view(
    list=extend_schema(
        tags=["Sales"],
        parameters=[
            OpenApiParameter("start", str, required=False, description="YYYY-MM-DD (inclusive)"),
            OpenApiParameter("end", str, required=False, description="YYYY-MM-DD (inclusive)"),
        ],
    ),
    retrieve=extend_schema(tags=["Sales"]),
)
class SaleViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = SaleSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["payment_method", "staff"]

    def get_queryset(self):
        if self.action == "list":
            period = ReportPeriodQuerySerializer(data=self.request.query_params)
            period.is_valid(raise_exception=True)
            qs = sales_in_period(period.validated_data["start"], period.validated_data["end"])
        else:
            qs = Sale.objects.all()

        return qs.prefetch_related("items").order_by("-sold_at")
