# pos/tests/fakes.py

"""
In-memory collaborators for POS core tests (no database).
"""

from decimal import Decimal

from pos.domain import (
    DiscountKind,
    ItemKind,
    LineItem,
    ProductItem,
    PromotionCode,
    ServiceItem,
)
from pos.exceptions import PersistenceFailure
from pos.services.catalog_index import CatalogIndex

HAIRCUT = ServiceItem(id="svc-1", name="Classic Haircut", price=Decimal("25.00"), duration=30, category="Haircuts")
BEARD_TRIM = ServiceItem(id="svc-2", name="Beard Trim", price=Decimal("15.00"), duration=15, category="Beard")
POMADE = ProductItem(id="prd-1", name="Matte Pomade", price=Decimal("18.00"), cost=Decimal("7.50"), stock=40, barcode="5012345678900")
BEARD_OIL = ProductItem(id="prd-2", name="Beard Oil", price=Decimal("22.00"), cost=Decimal("9.00"), stock=1, barcode="5012345678917")

# A product sharing an id with a service: lines are keyed by (id, kind)
SHARED_ID_PRODUCT = ProductItem(id="svc-1", name="Haircut Gift Card", price=Decimal("50.00"), stock=5)

WELCOME10 = PromotionCode(code="WELCOME10", kind=DiscountKind.PERCENTAGE, value=Decimal("10"))
FIVEOFF = PromotionCode(code="FIVEOFF", kind=DiscountKind.FIXED, value=Decimal("5.00"))
HUGEOFF = PromotionCode(code="HUGEOFF", kind=DiscountKind.FIXED, value=Decimal("100.00"))

PROMOTIONS = [WELCOME10, FIVEOFF, HUGEOFF]


def make_index(services=(HAIRCUT, BEARD_TRIM), products=(POMADE, BEARD_OIL)) -> CatalogIndex:
    return CatalogIndex(services=services, products=products)


def line(item, quantity=1) -> LineItem:
    return LineItem(item_id=item.id, kind=ItemKind(item.kind), name=item.name, unit_price=item.price, quantity=quantity)


class FakeCatalogSource:
    def __init__(self, services=(), products=()):
        self.services = list(services)
        self.products = list(products)

    def list_services(self):
        return list(self.services)

    def list_products(self):
        return list(self.products)


class FakeDirectory:
    def __init__(self, staff=None, customers=None):
        self.staff = dict(staff or {"staff-1": "Marcus"})
        self.customers = dict(customers or {"cust-1": "Jordan"})

    def resolve_staff_name(self, staff_id):
        return self.staff.get(staff_id)

    def resolve_customer_name(self, customer_id):
        return self.customers.get(customer_id)


class RecordingSaleSink:
    def __init__(self, *, fail=False):
        self.fail = fail
        self.sales = []

    def append(self, sale):
        if self.fail:
            raise PersistenceFailure("remote store unavailable", target="sale")
        self.sales.append(sale)
        return True


class RecordingInventorySink:
    def __init__(self, *, fail_for=()):
        self.fail_for = set(fail_for)
        self.calls = []

    def set_stock(self, product_id, new_stock):
        self.calls.append((product_id, new_stock))
        if product_id in self.fail_for:
            raise PersistenceFailure(f"stock write failed for {product_id}", target="inventory")
        return True
