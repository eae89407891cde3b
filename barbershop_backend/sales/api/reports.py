# sales/api/reports.py

"""
SALES REPORTS

PATH: sales/api/reports.py

Purpose:
- Finance view for the back office: period summary + commission report.

Contract:
- start/end are optional (YYYY-MM-DD, inclusive); open on the missing side.

Security:
- Admin-only (Django is_staff)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from sales.serializers.sale import (
    CommissionRowSerializer,
    ReportPeriodQuerySerializer,
    SalesSummarySerializer,
)
from sales.services.report_service import commission_report, sales_summary

PERIOD_PARAMETERS = [
    OpenApiParameter("start", str, required=False, description="YYYY-MM-DD (inclusive)"),
    OpenApiParameter("end", str, required=False, description="YYYY-MM-DD (inclusive)"),
]


def _period(request):
    params = ReportPeriodQuerySerializer(data=request.query_params)
    params.is_valid(raise_exception=True)
    return params.validated_data["start"], params.validated_data["end"]


class SalesSummaryReportView(APIView):
    permission_classes = [IsAuthenticated, IsAdminUser]

    @extend_schema(
        tags=["Reports"],
        summary="Sales summary for a period",
        parameters=PERIOD_PARAMETERS,
        responses={200: SalesSummarySerializer},
    )
    def get(self, request):
        start, end = _period(request)
        return Response(SalesSummarySerializer(sales_summary(start, end)).data)


class CommissionReportView(APIView):
    permission_classes = [IsAuthenticated, IsAdminUser]

    @extend_schema(
        tags=["Reports"],
        summary="Commission per employee for a period",
        parameters=PERIOD_PARAMETERS,
        responses={200: CommissionRowSerializer(many=True)},
    )
    def get(self, request):
        start, end = _period(request)
        return Response(CommissionRowSerializer(commission_report(start, end), many=True).data)
