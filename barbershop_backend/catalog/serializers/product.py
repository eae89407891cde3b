# catalog/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- Read-only product shape for the POS and back office.
- is_low_stock is derived (threshold falls back to POS_LOW_STOCK_DEFAULT).
"""

from rest_framework import serializers

from catalog.models import Product


class ProductSerializer(serializers.ModelSerializer):
    is_low_stock = serializers.BooleanField(read_only=True)
    effective_low_stock_threshold = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "cost",
            "stock",
            "barcode",
            "low_stock_threshold",
            "effective_low_stock_threshold",
            "is_low_stock",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
