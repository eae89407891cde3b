# sales/serializers/sale.py

from rest_framework import serializers

from sales.models import Sale

from .sale_item import SaleItemSerializer


class SaleSerializer(serializers.ModelSerializer):
    items = SaleItemSerializer(many=True, read_only=True)

    class Meta:
        model = Sale
        fields = [
            "id",
            "invoice_no",
            "sold_at",
            "staff",
            "staff_name",
            "customer",
            "customer_name",
            "items",
            "subtotal_amount",
            "discount_amount",
            "tax_amount",
            "total_amount",
            "promotion_code",
            "payment_method",
            "tax_mode",
        ]
        read_only_fields = fields


class ReportPeriodQuerySerializer(serializers.Serializer):
    """
    For Swagger docs + validation (GET query params).
    Dates are inclusive, YYYY-MM-DD.
    """

    start = serializers.DateField(required=False, allow_null=True, default=None)
    end = serializers.DateField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        start, end = attrs.get("start"), attrs.get("end")
        if start and end and start > end:
            raise serializers.ValidationError({"end": "end must be on or after start."})
        return attrs


class SalesSummarySerializer(serializers.Serializer):
    start = serializers.DateField(allow_null=True)
    end = serializers.DateField(allow_null=True)
    count = serializers.IntegerField()
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=2)
    discount = serializers.DecimalField(max_digits=14, decimal_places=2)
    tax = serializers.DecimalField(max_digits=14, decimal_places=2)
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    expenses = serializers.DecimalField(max_digits=14, decimal_places=2)
    net_profit = serializers.DecimalField(max_digits=14, decimal_places=2)
    by_payment_method = serializers.DictField(child=serializers.DecimalField(max_digits=14, decimal_places=2))


class CommissionRowSerializer(serializers.Serializer):
    staff_id = serializers.UUIDField()
    name = serializers.CharField()
    sales_count = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    commission_rate = serializers.DecimalField(max_digits=5, decimal_places=2)
    commission = serializers.DecimalField(max_digits=14, decimal_places=2)
