# catalog/urls.py

"""
CATALOG URLS

Purpose:
- Register catalog routes under /api/catalog/
    /services/, /products/, /products/low-stock/
    /search/?q=&kind=
    /barcode/<code>/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from catalog.views import BarcodeLookupView, CatalogSearchView, ProductViewSet, ServiceViewSet

app_name = "catalog"

router = DefaultRouter()
router.register(r"services", ServiceViewSet, basename="services")
router.register(r"products", ProductViewSet, basename="products")

urlpatterns = [
    path("search/", CatalogSearchView.as_view(), name="search"),
    path("barcode/<str:code>/", BarcodeLookupView.as_view(), name="barcode"),
    path("", include(router.urls)),
]
