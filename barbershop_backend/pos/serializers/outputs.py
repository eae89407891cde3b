# pos/serializers/outputs.py

"""
POS OUTPUT SERIALIZERS

Serialize POS core value objects (dataclasses) for the API.
Money leaves the core exact and is rounded to 2dp (ROUND_HALF_UP) here.
"""

from decimal import ROUND_HALF_UP

from rest_framework import serializers

from pos.domain import ItemKind, PaymentMethod, TaxMode


def money_field(**kwargs):
    return serializers.DecimalField(max_digits=14, decimal_places=2, rounding=ROUND_HALF_UP, **kwargs)


class LineItemSerializer(serializers.Serializer):
    id = serializers.CharField(source="item_id")
    kind = serializers.ChoiceField(choices=ItemKind.choices)
    name = serializers.CharField()
    unit_price = money_field()
    quantity = serializers.IntegerField()
    line_total = money_field()


class PriceBreakdownSerializer(serializers.Serializer):
    subtotal = money_field()
    discount = money_field()
    tax = money_field()
    total = money_field()


class QuoteSerializer(serializers.Serializer):
    items = LineItemSerializer(many=True, source="cart.lines")
    item_count = serializers.IntegerField(source="cart.item_count")
    staff_id = serializers.CharField(source="cart.staff_id", allow_null=True)
    customer_id = serializers.CharField(source="cart.customer_id", allow_null=True)
    promotion_code = serializers.CharField(source="cart.promotion_code", allow_null=True)
    promotion_applied = serializers.BooleanField()
    breakdown = PriceBreakdownSerializer()


class HeldSaleSerializer(serializers.Serializer):
    id = serializers.CharField()
    timestamp = serializers.DateTimeField()
    items = LineItemSerializer(many=True, source="lines")
    staff_id = serializers.CharField(allow_null=True)
    customer_id = serializers.CharField(allow_null=True)


class SaleSerializer(serializers.Serializer):
    id = serializers.CharField()
    timestamp = serializers.DateTimeField()
    items = LineItemSerializer(many=True, source="lines")
    staff_id = serializers.CharField()
    staff_name = serializers.CharField()
    customer_id = serializers.CharField(allow_null=True)
    customer_name = serializers.CharField(allow_null=True)
    subtotal = money_field()
    discount = money_field()
    tax = money_field()
    total = money_field()
    promotion_code = serializers.CharField(allow_null=True)
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)
    tax_mode = serializers.ChoiceField(choices=TaxMode.choices)


class StockUpdateSerializer(serializers.Serializer):
    product_id = serializers.CharField()
    previous_stock = serializers.IntegerField()
    new_stock = serializers.IntegerField()


class CheckoutResultSerializer(serializers.Serializer):
    sale = SaleSerializer()
    sale_saved = serializers.BooleanField()
    fully_persisted = serializers.BooleanField()
    stock_updates = StockUpdateSerializer(many=True)
    warnings = serializers.ListField(child=serializers.CharField())
    change = money_field(allow_null=True)
