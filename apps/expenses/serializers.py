from decimal import Decimal

from rest_framework import serializers

from .models import Expense, Settlement
from apps.accounts.serializers import UserMinimalSerializer


# =============================================================================
# Input Serializers
# =============================================================================

class ExpenseCreateSerializer(serializers.Serializer):
    """
    Validate input for adding an expense.

    Fields:
        description (str): What the money was spent on
        amount (Decimal): Non-negative, at most 2 decimal places
    """

    description = serializers.CharField(max_length=255)
    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
    )

    def validate_description(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Description cannot be blank.')
        return value


# =============================================================================
# Output Serializers
# =============================================================================

class ExpenseSerializer(serializers.ModelSerializer):
    """Expense with its payer."""

    added_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Expense
        fields = ['id', 'description', 'amount', 'added_by', 'created_at']
        read_only_fields = fields


class SettlementSerializer(serializers.ModelSerializer):
    """Settlement with its payer."""

    paid_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Settlement
        fields = ['id', 'amount', 'paid_by', 'created_at']
        read_only_fields = fields


class BalanceRowSerializer(serializers.Serializer):
    """One member's balance. Positive ``owes`` means the member owes the group."""

    user_id = serializers.UUIDField()
    name = serializers.CharField()
    owes = serializers.DecimalField(max_digits=14, decimal_places=2)


class SplitSummarySerializer(serializers.Serializer):
    """Total, per-head share and balances of a room."""

    total = serializers.DecimalField(max_digits=14, decimal_places=2)
    per_head = serializers.DecimalField(max_digits=14, decimal_places=2)
    balances = BalanceRowSerializer(many=True)


class ChartDataSerializer(serializers.Serializer):
    """Display name -> contribution."""

    data = serializers.DictField(
        child=serializers.DecimalField(max_digits=14, decimal_places=2)
    )


class LedgerClearedSerializer(serializers.Serializer):
    message = serializers.CharField()
    expenses_deleted = serializers.IntegerField()
    settlements_deleted = serializers.IntegerField()
