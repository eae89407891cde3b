# catalog/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Read-only product listing for the POS.
- Low stock alerts for the back office.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from catalog.models import Product
from catalog.serializers import ProductSerializer
from catalog.services import low_stock_products


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["barcode", "is_active"]

    def get_queryset(self):
        qs = Product.objects.all().order_by("name")
        if not IsAdminUser().has_permission(self.request, self):
            qs = qs.filter(is_active=True)
        return qs

    @extend_schema(
        tags=["Catalog"],
        summary="Low stock products",
        description="Active products whose stock is at or below their threshold.",
        responses={200: OpenApiResponse(response=ProductSerializer(many=True))},
    )
    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request):
        products = low_stock_products()
        return Response(ProductSerializer(products, many=True).data)
