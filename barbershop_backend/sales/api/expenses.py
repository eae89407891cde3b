# sales/api/expenses.py

"""
PATH: sales/api/expenses.py

EXPENSES API

GET  /api/sales/expenses/              (?start=&end=, inclusive dates)
POST /api/sales/expenses/
    - Any signed-in user (the counter records receipts as they come in)

DELETE /api/sales/expenses/<uuid>/
    - Admin-only (Django is_staff)
"""

from __future__ import annotations

from django.shortcuts import get_object_or_404
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.generics import GenericAPIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from sales.api.reports import PERIOD_PARAMETERS, _period
from sales.models import Expense
from sales.serializers import ExpenseCreateSerializer, ExpenseSerializer
from sales.services.expense_service import (
    ExpenseError,
    delete_expense,
    expenses_in_period,
    record_expense,
)


class ExpenseListCreateView(GenericAPIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ExpenseCreateSerializer

    @extend_schema(
        tags=["Expenses"],
        parameters=PERIOD_PARAMETERS,
        responses=ExpenseSerializer(many=True),
    )
    def get(self, request, *args, **kwargs):
        start, end = _period(request)
        qs = expenses_in_period(start, end).order_by("-expense_date", "-created_at")

        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(ExpenseSerializer(page, many=True).data)
        return Response(ExpenseSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["Expenses"],
        request=ExpenseCreateSerializer,
        responses={201: ExpenseSerializer, 400: dict},
    )
    def post(self, request, *args, **kwargs):
        s = self.get_serializer(data=request.data)
        s.is_valid(raise_exception=True)
        data = s.validated_data

        try:
            expense = record_expense(
                category=data["category"],
                amount=data["amount"],
                expense_date=data.get("expense_date"),
                description=data.get("description", ""),
                receipt_image=data.get("receipt_image", ""),
            )
        except ExpenseError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)


class ExpenseDetailView(GenericAPIView):
    permission_classes = [IsAuthenticated, IsAdminUser]
    serializer_class = ExpenseSerializer

    @extend_schema(tags=["Expenses"], responses={204: None})
    def delete(self, request, pk, *args, **kwargs):
        expense = get_object_or_404(Expense, pk=pk)
        delete_expense(expense)
        return Response(status=status.HTTP_204_NO_CONTENT)
