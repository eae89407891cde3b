# pos/serializers/cart.py

"""
POS INPUT SERIALIZERS

The terminal posts its cart state; the server re-prices it from the catalog.
Clients never send prices or names.
"""

from rest_framework import serializers

from pos.domain import ItemKind, PaymentMethod


class CartLineInputSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    kind = serializers.ChoiceField(choices=ItemKind.choices)
    quantity = serializers.IntegerField(min_value=1, default=1)


class CartPayloadSerializer(serializers.Serializer):
    items = CartLineInputSerializer(many=True, required=False, default=list)
    staff_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    customer_id = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    promotion_code = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class CheckoutInputSerializer(CartPayloadSerializer):
    payment_method = serializers.ChoiceField(
        choices=PaymentMethod.choices,
        required=False,
        default=PaymentMethod.CASH,
    )

    # Cash only: change = amount_received - total (may be negative, not blocked)
    amount_received = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        required=False,
        allow_null=True,
        default=None,
    )
