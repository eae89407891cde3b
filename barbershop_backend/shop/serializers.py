# shop/serializers.py

from rest_framework import serializers

from shop.models import PromotionCode, ShopSettings


class ShopSettingsSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShopSettings
        fields = ["shop_name", "currency", "tax_rate", "tax_type", "receipt_footer"]
        read_only_fields = fields


class PromotionCodeSerializer(serializers.ModelSerializer):
    class Meta:
        model = PromotionCode
        fields = ["code", "kind", "value", "description"]
        read_only_fields = fields
