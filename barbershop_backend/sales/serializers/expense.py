# sales/serializers/expense.py

from rest_framework import serializers

from sales.models import Expense


class ExpenseSerializer(serializers.ModelSerializer):
    """
    Output serializer (DB truth).
    """

    class Meta:
        model = Expense
        fields = [
            "id",
            "expense_date",
            "category",
            "amount",
            "description",
            "receipt_image",
            "created_at",
        ]
        read_only_fields = fields


class ExpenseCreateSerializer(serializers.Serializer):
    """
    Input serializer (Swagger-visible).
    """

    expense_date = serializers.DateField(required=False, allow_null=True, default=None)
    category = serializers.CharField(max_length=80)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    description = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    receipt_image = serializers.CharField(required=False, allow_blank=True, default="")

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("amount must be > 0")
        return value

    def validate_category(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("category is required")
        return v
