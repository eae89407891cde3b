# directory/serializers/__init__.py

from rest_framework import serializers

from directory.models import Customer, Staff


class StaffSerializer(serializers.ModelSerializer):
    class Meta:
        model = Staff
        fields = ["id", "name", "role", "commission_rate", "is_active"]
        read_only_fields = fields


class CustomerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Customer
        fields = ["id", "name", "phone", "email"]
        read_only_fields = fields


__all__ = ["CustomerSerializer", "StaffSerializer"]
