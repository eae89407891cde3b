# catalog/views/catalog.py

"""
CATALOG LOOKUP VIEWS

Purpose:
- Unified search across services and products (what the POS grid shows).
- Barcode lookup for the scanner.

Both read through the POS core CatalogIndex so the API and the terminal agree
on matching rules.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.serializers import CatalogItemSerializer
from catalog.services import DjangoCatalogSource
from pos.domain import ItemKind
from pos.exceptions import BarcodeNotFound, ScannerFailure
from pos.services.barcode import BarcodeResolver
from pos.services.catalog_index import CatalogIndex
from pos.views.api import error_response


class CatalogSearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")
    kind = serializers.ChoiceField(choices=ItemKind.choices, required=False, allow_blank=True, default="")


def load_catalog_index() -> CatalogIndex:
    return CatalogIndex.from_source(DjangoCatalogSource())


class CatalogSearchView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Catalog"],
        summary="Search services and products",
        parameters=[
            OpenApiParameter("q", str, required=False, description="Case-insensitive substring"),
            OpenApiParameter("kind", str, required=False, enum=[k for k, _ in ItemKind.choices]),
        ],
        responses={200: CatalogItemSerializer(many=True)},
    )
    def get(self, request):
        params = CatalogSearchQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        index = load_catalog_index()
        items = index.search(params.validated_data["q"], params.validated_data["kind"] or None)
        return Response(CatalogItemSerializer(items, many=True).data)


class BarcodeLookupView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Catalog"],
        summary="Resolve a scanned barcode",
        responses={200: CatalogItemSerializer},
    )
    def get(self, request, code: str):
        resolver = BarcodeResolver(load_catalog_index())
        try:
            product = resolver.resolve(code)
        except ScannerFailure as exc:
            return error_response(code="SCANNER_FAILURE", message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)
        except BarcodeNotFound as exc:
            return error_response(code="UNKNOWN_BARCODE", message=str(exc), http_status=status.HTTP_404_NOT_FOUND)

        return Response(CatalogItemSerializer(product).data)
