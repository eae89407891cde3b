# directory/views/__init__.py

"""
Directory pickers for the POS (staff and customer dropdowns).
Editing happens in the admin.
"""

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, viewsets
from rest_framework.permissions import IsAuthenticated

from directory.models import Customer, Staff
from directory.serializers import CustomerSerializer, StaffSerializer


class StaffViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Staff.objects.filter(is_active=True).order_by("name")
    serializer_class = StaffSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["role"]


class CustomerViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Customer.objects.all().order_by("name")
    serializer_class = CustomerSerializer
    permission_classes = [IsAuthenticated]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    search_fields = ["name", "phone", "email"]


__all__ = ["CustomerViewSet", "StaffViewSet"]
