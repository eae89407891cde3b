# pos/tests/test_pricing.py

from decimal import Decimal

from django.test import SimpleTestCase

from pos.domain import Cart, DiscountKind, PromotionCode, TaxMode, TaxPolicy
from pos.services.pricing import compute_breakdown, find_promotion
from pos.tests.fakes import BEARD_TRIM, HAIRCUT, POMADE, PROMOTIONS, line


class PricingEngineTests(SimpleTestCase):
    """
    Pricing engine.

    GUARANTEES:
    - subtotal = sum(unit_price * quantity)
    - percentage / fixed discounts (fixed is not clamped)
    - tax included (backed out) vs excluded (added on top)
    - pure: identical inputs -> identical outputs
    """

    def setUp(self):
        self.cart = Cart(lines=[line(HAIRCUT), line(POMADE, 2)])

    def test_subtotal_without_promotion_or_tax(self):
        result = compute_breakdown(self.cart, PROMOTIONS, TaxPolicy.none())

        self.assertEqual(result.subtotal, Decimal("61.00"))
        self.assertEqual(result.discount, Decimal("0"))
        self.assertEqual(result.tax, Decimal("0"))
        self.assertEqual(result.total, Decimal("61.00"))

    def test_empty_cart_is_all_zero(self):
        result = compute_breakdown(Cart(), PROMOTIONS, TaxPolicy(rate=Decimal("10")))

        self.assertEqual(result.total, Decimal("0"))
        self.assertEqual(result.tax, Decimal("0"))

    def test_percentage_discount(self):
        self.cart.promotion_code = "WELCOME10"

        result = compute_breakdown(self.cart, PROMOTIONS, TaxPolicy.none())

        self.assertEqual(result.discount, Decimal("6.1"))
        self.assertEqual(result.total, Decimal("54.9"))

    def test_fixed_discount(self):
        self.cart.promotion_code = "FIVEOFF"

        result = compute_breakdown(self.cart, PROMOTIONS, TaxPolicy.none())

        self.assertEqual(result.discount, Decimal("5.00"))
        self.assertEqual(result.total, Decimal("56.00"))

    def test_fixed_discount_larger_than_subtotal_is_not_clamped(self):
        cart = Cart(lines=[line(BEARD_TRIM)], promotion_code="HUGEOFF")

        result = compute_breakdown(cart, PROMOTIONS, TaxPolicy.none())

        self.assertEqual(result.discount, Decimal("100.00"))
        self.assertEqual(result.discounted_amount, Decimal("-85.00"))
        self.assertEqual(result.total, Decimal("-85.00"))

    def test_unknown_promotion_applies_nothing(self):
        self.cart.promotion_code = "NOPE"

        result = compute_breakdown(self.cart, PROMOTIONS, TaxPolicy.none())

        self.assertEqual(result.discount, Decimal("0"))

    def test_promotion_match_is_exact(self):
        self.assertIsNone(find_promotion("welcome10", PROMOTIONS))
        self.assertEqual(find_promotion("WELCOME10", PROMOTIONS).code, "WELCOME10")

    def test_tax_excluded_is_added_on_top(self):
        self.cart.promotion_code = "FIVEOFF"

        result = compute_breakdown(self.cart, PROMOTIONS, TaxPolicy(rate=Decimal("10"), mode=TaxMode.EXCLUDED))

        self.assertEqual(result.tax, Decimal("5.600"))
        self.assertEqual(result.total, Decimal("61.600"))

    def test_tax_included_is_backed_out_of_total(self):
        cart = Cart(lines=[line(HAIRCUT)])

        result = compute_breakdown(cart, PROMOTIONS, TaxPolicy(rate=Decimal("25"), mode=TaxMode.INCLUDED))

        self.assertEqual(result.total, Decimal("25.00"))
        self.assertEqual(result.tax, Decimal("5.00"))
        self.assertEqual(result.total - result.tax, Decimal("20.00"))

    def test_included_tax_round_trip_is_exact_to_the_cent(self):
        cart = Cart(lines=[line(POMADE)])

        result = compute_breakdown(cart, PROMOTIONS, TaxPolicy(rate=Decimal("7.5"), mode=TaxMode.INCLUDED))

        net = result.total - result.tax
        self.assertEqual((net * Decimal("1.075")).quantize(Decimal("0.01")), Decimal("18.00"))

    def test_percentage_promotion_with_excluded_tax(self):
        cart = Cart(lines=[line(HAIRCUT, 2)], promotion_code="SAVE10")
        save10 = PromotionCode(code="SAVE10", kind=DiscountKind.PERCENTAGE, value=Decimal("10"))

        result = compute_breakdown(cart, [save10], TaxPolicy(rate=Decimal("5"), mode=TaxMode.EXCLUDED))

        self.assertEqual(result.subtotal, Decimal("50"))
        self.assertEqual(result.discount, Decimal("5"))
        self.assertEqual(result.tax, Decimal("2.25"))
        self.assertEqual(result.total, Decimal("47.25"))

    def test_included_tax_on_fifty_keeps_fractional_cents(self):
        cart = Cart(lines=[line(HAIRCUT, 2)])

        result = compute_breakdown(cart, PROMOTIONS, TaxPolicy(rate=Decimal("10"), mode=TaxMode.INCLUDED))

        self.assertEqual(result.total, Decimal("50"))
        self.assertEqual(result.tax.quantize(Decimal("0.0001")), Decimal("4.5455"))
        self.assertEqual(result.tax, Decimal("50") - Decimal("50") / Decimal("1.1"))

    def test_identical_inputs_give_identical_outputs(self):
        policy = TaxPolicy(rate=Decimal("8.25"))
        self.cart.promotion_code = "WELCOME10"

        self.assertEqual(
            compute_breakdown(self.cart, PROMOTIONS, policy),
            compute_breakdown(self.cart, PROMOTIONS, policy),
        )
