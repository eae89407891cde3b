"""
PATH: pos/urls.py

POS URLS

Purpose:
- Cart quote + checkout
- Held sales (park / list / resume / discard)
"""

from django.urls import path

from pos.views.api import (
    CheckoutView,
    HeldSaleDetailView,
    HeldSaleListView,
    HeldSaleResumeView,
    QuoteView,
)

app_name = "pos"

urlpatterns = [
    path("quote/", QuoteView.as_view(), name="quote"),
    path("checkout/", CheckoutView.as_view(), name="checkout"),

    path("held-sales/", HeldSaleListView.as_view(), name="held-sales"),
    path("held-sales/<str:hold_id>/resume/", HeldSaleResumeView.as_view(), name="held-sale-resume"),
    path("held-sales/<str:hold_id>/", HeldSaleDetailView.as_view(), name="held-sale-detail"),
]
