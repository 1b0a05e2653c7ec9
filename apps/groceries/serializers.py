from decimal import Decimal

from rest_framework import serializers

from .models import GroceryItem
from apps.accounts.serializers import UserMinimalSerializer


class GroceryItemCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Item name is required')
        return value


class PurchaseSerializer(serializers.Serializer):
    """Price paid for a grocery item."""

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
    )


class GroceryItemSerializer(serializers.ModelSerializer):
    added_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = GroceryItem
        fields = ['id', 'name', 'added_by', 'is_purchased', 'created_at']
        read_only_fields = fields
