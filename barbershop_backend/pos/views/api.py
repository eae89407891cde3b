# pos/views/api.py

"""
POS API VIEWS

Purpose:
- Quote: price a posted cart (subtotal, discount, tax, total).
- Checkout: finalize a posted cart into a Sale via the checkout orchestrator.
- Held sales: park / list / resume / discard carts on this terminal host.

Hard rules:
- Money is server-owned: names and unit prices are snapshotted from the catalog;
  the client only sends (id, kind, quantity).
- Checkout is NOT wrapped in one DB transaction: the sale insert and each stock
  write commit independently (best-effort remote persistence), and their
  failures come back as warnings, not errors.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from pos.exceptions import CheckoutValidationError, HeldSaleNotFound, StorageUnavailable, UnknownCatalogItem
from pos.serializers import (
    CartPayloadSerializer,
    CheckoutInputSerializer,
    CheckoutResultSerializer,
    HeldSaleSerializer,
    QuoteSerializer,
)
from pos.services.pricing import find_promotion
from pos.services.wiring import build_held_sale_store, build_terminal_session, load_cart_payload


# =====================================================
# API ERROR NORMALIZATION
# =====================================================

def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def unknown_item_response(exc: UnknownCatalogItem):
    return error_response(
        code="UNKNOWN_ITEM",
        message=str(exc),
        http_status=status.HTTP_400_BAD_REQUEST,
    )


def held_sale_not_found_response(exc: HeldSaleNotFound):
    return error_response(
        code="HELD_SALE_NOT_FOUND",
        message=str(exc),
        http_status=status.HTTP_404_NOT_FOUND,
    )


def held_sales_busy_response(exc: StorageUnavailable):
    return error_response(
        code="HELD_SALES_BUSY",
        message=str(exc),
        http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


# =====================================================
# HELPERS
# =====================================================

def _quote_payload(session) -> dict:
    cart = session.cart
    return {
        "cart": cart,
        "promotion_applied": find_promotion(cart.promotion_code, session.promotions) is not None,
        "breakdown": session.breakdown,
    }


CART_EXAMPLE = {
    "items": [
        {"id": "2f6c3a5e-8c1e-4d7a-9a43-0f3c2b1d9e10", "kind": "service", "quantity": 1},
        {"id": "7b1e4f9a-3d2c-4a8b-b6e5-1c9d8e7f6a50", "kind": "product", "quantity": 2},
    ],
    "staff_id": "c5d4e3f2-a1b0-4c9d-8e7f-6a5b4c3d2e1f",
    "customer_id": None,
    "promotion_code": "welcome10",
}


# =====================================================
# POS API VIEWS
# =====================================================

class QuoteView(APIView):
    """
    Price a cart without side effects.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["POS"],
        request=CartPayloadSerializer,
        responses={200: QuoteSerializer},
        description="Re-price a cart from the catalog and return the full price breakdown.",
        examples=[OpenApiExample("Cart", value=CART_EXAMPLE, request_only=True)],
    )
    def post(self, request):
        serializer = CartPayloadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = build_terminal_session()
        try:
            load_cart_payload(session, serializer.validated_data)
        except UnknownCatalogItem as exc:
            return unknown_item_response(exc)

        return Response(QuoteSerializer(_quote_payload(session)).data, status=status.HTTP_200_OK)


class CheckoutView(APIView):
    """
    Finalize a cart into a Sale.

    201 means the sale happened. Remote persistence problems are reported in
    "warnings" (and sale_saved / fully_persisted flags), never as an error status.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["POS"],
        request=CheckoutInputSerializer,
        responses={201: CheckoutResultSerializer},
        description="Checkout a cart (staff required). Cash payments may send amount_received to get change.",
        examples=[
            OpenApiExample(
                "Cash with change",
                value={**CART_EXAMPLE, "payment_method": "cash", "amount_received": "100.00"},
                request_only=True,
            ),
            OpenApiExample(
                "Card",
                value={**CART_EXAMPLE, "payment_method": "card"},
                request_only=True,
            ),
        ],
    )
    def post(self, request):
        serializer = CheckoutInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        session = build_terminal_session()
        try:
            load_cart_payload(session, data)
        except UnknownCatalogItem as exc:
            return unknown_item_response(exc)

        try:
            result = session.checkout(data["payment_method"], amount_received=data.get("amount_received"))
        except CheckoutValidationError as exc:
            return error_response(
                code=exc.code,
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        payload = {
            "sale": result.sale,
            "sale_saved": result.sale_saved,
            "fully_persisted": result.fully_persisted,
            "stock_updates": result.stock_updates,
            "warnings": result.warnings,
            "change": session.last_change,
        }
        return Response(CheckoutResultSerializer(payload).data, status=status.HTTP_201_CREATED)


class HeldSaleListView(APIView):
    """
    GET: parked carts, newest first.
    POST: park a cart (must not be empty).
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["POS"], responses={200: HeldSaleSerializer(many=True)})
    def get(self, request):
        store = build_held_sale_store()
        return Response(HeldSaleSerializer(store.list(), many=True).data)

    @extend_schema(
        tags=["POS"],
        request=CartPayloadSerializer,
        responses={201: HeldSaleSerializer},
        examples=[OpenApiExample("Cart", value=CART_EXAMPLE, request_only=True)],
    )
    def post(self, request):
        serializer = CartPayloadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = build_terminal_session()
        try:
            load_cart_payload(session, serializer.validated_data)
            held = session.hold()
        except UnknownCatalogItem as exc:
            return unknown_item_response(exc)
        except CheckoutValidationError as exc:
            return error_response(code=exc.code, message=str(exc), http_status=status.HTTP_400_BAD_REQUEST)
        except StorageUnavailable as exc:
            return held_sales_busy_response(exc)

        return Response(HeldSaleSerializer(held).data, status=status.HTTP_201_CREATED)


class HeldSaleResumeView(APIView):
    """
    Remove a held sale from the parked list and return it as a priced cart.
    Lines keep the prices they were held at.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["POS"], request=None, responses={200: QuoteSerializer})
    def post(self, request, hold_id: str):
        session = build_terminal_session()
        try:
            session.resume(hold_id)
        except HeldSaleNotFound as exc:
            return held_sale_not_found_response(exc)
        except StorageUnavailable as exc:
            return held_sales_busy_response(exc)

        return Response(QuoteSerializer(_quote_payload(session)).data, status=status.HTTP_200_OK)


class HeldSaleDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(tags=["POS"], responses={204: None})
    def delete(self, request, hold_id: str):
        store = build_held_sale_store()
        try:
            store.discard(hold_id)
        except HeldSaleNotFound as exc:
            return held_sale_not_found_response(exc)
        except StorageUnavailable as exc:
            return held_sales_busy_response(exc)

        return Response(status=status.HTTP_204_NO_CONTENT)
