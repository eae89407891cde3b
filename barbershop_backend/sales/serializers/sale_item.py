# sales/serializers/sale_item.py

from rest_framework import serializers

from sales.models import SaleItem


class SaleItemSerializer(serializers.ModelSerializer):
    """
    Sale line item serializer (read-only).
    Designed for receipts + UI display.
    """

    class Meta:
        model = SaleItem
        fields = [
            "item_id",
            "kind",
            "name",
            "quantity",
            "unit_price",
            "total_price",
        ]
        read_only_fields = fields
