# catalog/serializers/catalog_item.py

"""
CATALOG ITEM SERIALIZER

Serializes POS core snapshots (ServiceItem / ProductItem) into one tagged shape:
  {"id", "kind", "name", "price", ...variant fields}
"""

from rest_framework import serializers

from pos.domain import ItemKind


class CatalogItemSerializer(serializers.Serializer):
    id = serializers.CharField()
    kind = serializers.ChoiceField(choices=ItemKind.choices)
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)

    # service only
    duration = serializers.IntegerField(required=False)
    category = serializers.CharField(required=False)

    # product only
    stock = serializers.IntegerField(required=False)
    barcode = serializers.CharField(required=False, allow_null=True)
    is_low_stock = serializers.BooleanField(required=False)

    def to_representation(self, instance):
        data = {
            "id": instance.id,
            "kind": str(instance.kind),
            "name": instance.name,
            "price": f"{instance.price:.2f}",
        }
        if instance.kind == ItemKind.SERVICE:
            data["duration"] = instance.duration
            data["category"] = instance.category
        else:
            data["stock"] = instance.stock
            data["barcode"] = instance.barcode
            data["is_low_stock"] = instance.is_low_stock
        return data
