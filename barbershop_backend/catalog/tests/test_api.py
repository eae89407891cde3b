# catalog/tests/test_api.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from catalog.models import Product, Service

User = get_user_model()


class CatalogAPITests(TestCase):
    """
    Catalog API (search, barcode, low stock).
    """

    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="cashier", password="pass12345")
        self.client.force_authenticate(user=self.user)

        Service.objects.create(name="Beard Trim", category="Beard", price=Decimal("15.00"))
        Service.objects.create(name="Classic Haircut", category="Haircuts", price=Decimal("25.00"))
        self.oil = Product.objects.create(
            name="Beard Oil",
            price=Decimal("22.00"),
            stock=3,
            barcode="5012345678917",
        )

    # -----------------------------
    # Search
    # -----------------------------

    def test_search_matches_services_and_products(self):
        res = self.client.get("/api/catalog/search/", {"q": "beard"})

        self.assertEqual(res.status_code, 200)
        kinds = sorted(item["kind"] for item in res.data)
        self.assertEqual(kinds, ["product", "service"])

    def test_search_can_be_limited_by_kind(self):
        res = self.client.get("/api/catalog/search/", {"q": "beard", "kind": "service"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual([item["name"] for item in res.data], ["Beard Trim"])

    def test_search_rejects_unknown_kind(self):
        res = self.client.get("/api/catalog/search/", {"kind": "voucher"})

        self.assertEqual(res.status_code, 400)

    # -----------------------------
    # Barcode
    # -----------------------------

    def test_barcode_lookup_returns_product(self):
        res = self.client.get("/api/catalog/barcode/5012345678917/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["id"], str(self.oil.id))
        self.assertEqual(res.data["price"], "22.00")

    def test_unknown_barcode_is_404_with_error_envelope(self):
        res = self.client.get("/api/catalog/barcode/0000/")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.data["error"]["code"], "UNKNOWN_BARCODE")
        self.assertIn("0000", res.data["error"]["message"])

    # -----------------------------
    # Products
    # -----------------------------

    def test_low_stock_endpoint(self):
        Product.objects.create(name="Pomade", price=Decimal("18.00"), stock=80)

        res = self.client.get("/api/catalog/products/low-stock/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual([p["name"] for p in res.data], ["Beard Oil"])
        self.assertTrue(res.data[0]["is_low_stock"])

    def test_requires_authentication(self):
        anon = APIClient()

        res = anon.get("/api/catalog/search/")

        self.assertEqual(res.status_code, 401)
