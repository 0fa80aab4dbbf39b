"""
Discount validation and application serializers.
"""
from decimal import Decimal

from rest_framework import serializers
from ..models import DiscountTransaction


class DiscountRequestSerializer(serializers.Serializer):
    """
    A proposed discount. Either ``product_id`` or both ``original_price``
    and ``cost`` must be supplied.
    Used for: POST /api/discounts/validate/, POST /api/discounts/apply/
    """
    product_id = serializers.IntegerField(required=False, allow_null=True)
    discount_pct = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100)
    original_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0.01'), required=False, allow_null=True)
    cost = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True)
    sale_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
    sale_item_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
    reason = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True)

    def validate(self, attrs):
        has_prices = attrs.get('original_price') is not None and attrs.get('cost') is not None
        if attrs.get('product_id') is None and not has_prices:
            raise serializers.ValidationError("Provide product_id or both original_price and cost")
        return attrs


class DiscountDecisionSerializer(serializers.Serializer):
    """Serializer for validation decision response"""
    allowed = serializers.BooleanField()
    reason = serializers.CharField()
    reason_code = serializers.CharField()
    margin_before = serializers.DecimalField(max_digits=16, decimal_places=1, allow_null=True)
    margin_after = serializers.DecimalField(max_digits=16, decimal_places=1, allow_null=True)
    max_allowed_pct = serializers.DecimalField(max_digits=5, decimal_places=2, allow_null=True)
    escalation_required = serializers.BooleanField()
    escalation_reason = serializers.CharField(allow_null=True)
    budget_remaining = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    calculations = serializers.DictField(allow_null=True)


class DiscountTransactionSerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source='employee.full_name', read_only=True)
    approved_by_name = serializers.CharField(source='approved_by.full_name', read_only=True, default=None)

    class Meta:
        model = DiscountTransaction
        fields = [
            'id', 'sale_id', 'sale_item_id', 'employee', 'employee_name', 'product',
            'original_price', 'product_cost', 'discount_pct', 'discount_amount',
            'price_after_discount', 'margin_before_pct', 'margin_after_pct',
            'commission_impact', 'was_auto_approved', 'required_manager_approval',
            'approval_reason', 'approved_by', 'approved_by_name', 'budget_period',
            'tier_version', 'created_at'
        ]
        read_only_fields = fields
