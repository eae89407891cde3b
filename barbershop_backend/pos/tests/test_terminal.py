# pos/tests/test_terminal.py

from decimal import Decimal

from django.test import SimpleTestCase

from pos.domain import ItemKind, PaymentMethod, TaxMode, TaxPolicy
from pos.exceptions import CheckoutValidationError, HeldSaleNotFound, ScannerFailure
from pos.services.checkout_orchestrator import CheckoutOrchestrator
from pos.services.held_sales import HeldSaleStore
from pos.services.storage import InMemoryStorage
from pos.services.terminal import ScanResult, TerminalSession, TerminalState
from pos.tests.fakes import (
    HAIRCUT,
    POMADE,
    PROMOTIONS,
    FakeDirectory,
    RecordingInventorySink,
    RecordingSaleSink,
    make_index,
)


class TerminalSessionTests(SimpleTestCase):
    """
    Terminal state machine.

    EMPTY -> BUILDING (add/scan) -> EMPTY (hold) | COMPLETED (checkout)
    """

    def setUp(self):
        self.index = make_index()
        self.sale_sink = RecordingSaleSink()
        self.inventory_sink = RecordingInventorySink()
        self.held_sales = HeldSaleStore(InMemoryStorage(), key="terminal.tests")
        self.session = self._session()

    def _session(self, **kwargs):
        orchestrator = CheckoutOrchestrator(
            directory=FakeDirectory(),
            sale_sink=self.sale_sink,
            inventory_sink=self.inventory_sink,
            catalog_index=self.index,
        )
        return TerminalSession(
            catalog_index=self.index,
            held_sales=self.held_sales,
            orchestrator=orchestrator,
            promotions=PROMOTIONS,
            **kwargs,
        )

    # -----------------------------
    # Building
    # -----------------------------

    def test_starts_empty(self):
        self.assertEqual(self.session.state, TerminalState.EMPTY)

    def test_add_item_moves_to_building(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        self.assertEqual(self.session.state, TerminalState.BUILDING)

    def test_add_unknown_item_returns_none(self):
        self.assertIsNone(self.session.add_item("missing", ItemKind.SERVICE))
        self.assertEqual(self.session.state, TerminalState.EMPTY)

    def test_breakdown_is_recomputed_on_every_read(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)
        self.assertEqual(self.session.breakdown.total, Decimal("25.00"))

        self.session.add_item(POMADE.id, ItemKind.PRODUCT)
        self.assertEqual(self.session.breakdown.total, Decimal("43.00"))

        self.session.refresh_config(tax_policy=TaxPolicy(rate=Decimal("10"), mode=TaxMode.EXCLUDED))
        self.assertEqual(self.session.breakdown.total, Decimal("47.300"))

    def test_promotion_code_is_upper_cased_on_entry(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        self.session.apply_promotion_code(" fiveoff ")

        self.assertEqual(self.session.cart.promotion_code, "FIVEOFF")
        self.assertEqual(self.session.breakdown.discount, Decimal("5.00"))

    def test_cancel_empties_cart(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)
        self.session.select_staff("staff-1")

        self.session.cancel()

        self.assertEqual(self.session.state, TerminalState.EMPTY)
        self.assertIsNone(self.session.cart.staff_id)

    # -----------------------------
    # Scanning
    # -----------------------------

    def test_scan_adds_product(self):
        result = self.session.scan("5012345678900")

        self.assertTrue(result.found)
        self.assertEqual(result.message, "Added: Matte Pomade")
        self.assertEqual(self.session.cart.lines[0].item_id, POMADE.id)

    def test_scan_miss_is_soft(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        result = self.session.scan("0000")

        self.assertEqual(result.status, ScanResult.NOT_FOUND)
        self.assertEqual(result.message, "Unknown product: 0000")
        self.assertEqual(len(self.session.cart.lines), 1)

    def test_blank_scan_raises(self):
        with self.assertRaises(ScannerFailure):
            self.session.scan("")

    # -----------------------------
    # Hold / resume
    # -----------------------------

    def test_hold_parks_cart_and_empties_terminal(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)
        self.session.select_customer("cust-1")

        held = self.session.hold()

        self.assertEqual(self.session.state, TerminalState.EMPTY)
        self.assertEqual([h.id for h in self.session.held()], [held.id])
        self.assertEqual(held.customer_id, "cust-1")

    def test_hold_empty_cart_is_rejected(self):
        with self.assertRaises(CheckoutValidationError) as ctx:
            self.session.hold()

        self.assertEqual(ctx.exception.code, CheckoutValidationError.EMPTY_CART)
        self.assertEqual(self.session.held(), [])

    def test_resume_restores_cart(self):
        self.session.add_item(POMADE.id, ItemKind.PRODUCT)
        self.session.adjust_quantity(POMADE.id, ItemKind.PRODUCT, 2)
        self.session.select_staff("staff-1")
        held = self.session.hold()

        self.session.resume(held.id)

        self.assertEqual(self.session.state, TerminalState.BUILDING)
        self.assertEqual(self.session.cart.lines[0].quantity, 3)
        self.assertEqual(self.session.cart.staff_id, "staff-1")
        self.assertEqual(self.session.held(), [])

    def test_resume_over_active_cart_overwrites_and_logs(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)
        held = self.session.hold()
        self.session.add_item(POMADE.id, ItemKind.PRODUCT)

        with self.assertLogs("pos.services.terminal", level="INFO"):
            self.session.resume(held.id)

        self.assertEqual([l.item_id for l in self.session.cart.lines], [HAIRCUT.id])

    def test_discard(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)
        held = self.session.hold()

        self.session.discard(held.id)

        self.assertEqual(self.session.held(), [])
        with self.assertRaises(HeldSaleNotFound):
            self.session.resume(held.id)

    # -----------------------------
    # Checkout
    # -----------------------------

    def test_checkout_completes_then_next_item_starts_building(self):
        self.session.select_staff("staff-1")
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        result = self.session.checkout(PaymentMethod.CASH, amount_received=Decimal("30.00"))

        self.assertEqual(self.session.state, TerminalState.COMPLETED)
        self.assertIs(self.session.last_sale, result.sale)
        self.assertEqual(self.session.last_change, Decimal("5.00"))

        self.session.add_item(POMADE.id, ItemKind.PRODUCT)
        self.assertEqual(self.session.state, TerminalState.BUILDING)

    def test_consecutive_checkouts_keep_decrementing_stock(self):
        for _ in range(2):
            self.session.select_staff("staff-1")
            self.session.add_item(POMADE.id, ItemKind.PRODUCT)
            self.session.checkout(PaymentMethod.CARD)

        self.assertEqual(self.inventory_sink.calls, [("prd-1", 39), ("prd-1", 38)])
        self.assertEqual(self.index.find(POMADE.id, ItemKind.PRODUCT).stock, 38)

    def test_failed_stock_write_still_moves_local_snapshot(self):
        self.inventory_sink.fail_for.add("prd-1")
        self.session.select_staff("staff-1")
        self.session.add_item(POMADE.id, ItemKind.PRODUCT)

        result = self.session.checkout(PaymentMethod.CARD)

        self.assertFalse(result.fully_persisted)
        self.assertEqual(self.index.find(POMADE.id, ItemKind.PRODUCT).stock, 39)

    def test_checkout_uses_tax_mode_from_policy(self):
        self.session.refresh_config(tax_policy=TaxPolicy(rate=Decimal("20"), mode=TaxMode.INCLUDED))
        self.session.select_staff("staff-1")
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        sale = self.session.checkout(PaymentMethod.CARD).sale

        self.assertEqual(sale.tax_mode, TaxMode.INCLUDED)
        self.assertEqual(sale.total, Decimal("25.00"))
        self.assertIsNone(self.session.last_change)

    def test_invalid_checkout_stays_building(self):
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        with self.assertRaises(CheckoutValidationError):
            self.session.checkout()

        self.assertEqual(self.session.state, TerminalState.BUILDING)
        self.assertEqual(self.sale_sink.sales, [])

    def test_employee_terminal_keeps_its_staff_between_sales(self):
        session = self._session(operator_is_employee=True, operator_staff_id="staff-1")
        session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        session.checkout()

        self.assertEqual(session.cart.staff_id, "staff-1")

    def test_admin_terminal_resets_staff_after_sale(self):
        self.session.select_staff("staff-1")
        self.session.add_item(HAIRCUT.id, ItemKind.SERVICE)

        self.session.checkout()

        self.assertIsNone(self.session.cart.staff_id)
