"""Customer DRF serializers for API input/output."""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CreateCustomerSerializer(serializers.Serializer):
    """Validates the customer creation request payload."""

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=254)


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    class Meta:
        model = Customer
        fields = ["id", "name", "email", "created_at", "updated_at"]
        read_only_fields = fields
