# pos/tests/test_catalog_index.py

from django.test import SimpleTestCase

from pos.domain import ItemKind
from pos.exceptions import BarcodeNotFound, ScannerFailure
from pos.services.barcode import BarcodeResolver
from pos.services.catalog_index import CatalogIndex
from pos.tests.fakes import BEARD_OIL, BEARD_TRIM, HAIRCUT, POMADE, FakeCatalogSource, make_index


class CatalogIndexTests(SimpleTestCase):
    def setUp(self):
        self.index = make_index()

    def test_from_source(self):
        index = CatalogIndex.from_source(FakeCatalogSource(services=[HAIRCUT], products=[POMADE]))

        self.assertIs(index.find("svc-1", ItemKind.SERVICE), HAIRCUT)
        self.assertIs(index.find("prd-1", "product"), POMADE)

    def test_find_respects_kind(self):
        self.assertIsNone(self.index.find("svc-1", ItemKind.PRODUCT))
        self.assertIsNone(self.index.find("svc-1", "voucher"))

    def test_search_is_case_insensitive_over_name(self):
        results = self.index.search("BEARD")

        self.assertEqual(results, [BEARD_TRIM, BEARD_OIL])

    def test_search_services_by_category(self):
        self.assertEqual(self.index.search("haircuts", ItemKind.SERVICE), [HAIRCUT])

    def test_search_products_by_barcode(self):
        self.assertEqual(self.index.search("8917", ItemKind.PRODUCT), [BEARD_OIL])

    def test_empty_query_returns_everything_of_kind(self):
        self.assertEqual(self.index.search("", ItemKind.PRODUCT), [POMADE, BEARD_OIL])
        self.assertEqual(len(self.index.search()), 4)

    def test_update_stock_replaces_product_snapshot(self):
        updated = self.index.update_stock("prd-1", 12)

        self.assertEqual(updated.stock, 12)
        self.assertIs(self.index.find("prd-1", ItemKind.PRODUCT), updated)
        self.assertIs(self.index.product_by_barcode(POMADE.barcode), updated)
        self.assertEqual(POMADE.stock, 40)

    def test_update_stock_ignores_services_and_unknown_ids(self):
        self.assertIsNone(self.index.update_stock("svc-1", 3))
        self.assertIsNone(self.index.update_stock("nope", 3))
        self.assertIs(self.index.find("svc-1", ItemKind.SERVICE), HAIRCUT)


class BarcodeResolverTests(SimpleTestCase):
    def setUp(self):
        self.resolver = BarcodeResolver(make_index())

    def test_exact_match(self):
        self.assertIs(self.resolver.resolve("5012345678900"), POMADE)

    def test_surrounding_whitespace_is_ignored(self):
        self.assertIs(self.resolver.resolve(" 5012345678900\n"), POMADE)

    def test_miss_raises_not_found(self):
        with self.assertLogs("pos.services.barcode", level="INFO"):
            with self.assertRaises(BarcodeNotFound) as ctx:
                self.resolver.resolve("0000")

        self.assertEqual(ctx.exception.code, "0000")
        self.assertEqual(str(ctx.exception), "Unknown product: 0000")

    def test_partial_code_does_not_match(self):
        with self.assertRaises(BarcodeNotFound):
            self.resolver.resolve("50123456789")

    def test_blank_scan_is_a_scanner_failure(self):
        with self.assertRaises(ScannerFailure):
            self.resolver.resolve("   ")
        with self.assertRaises(ScannerFailure):
            self.resolver.resolve(None)
