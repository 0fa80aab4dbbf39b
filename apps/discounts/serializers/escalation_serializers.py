"""
Discount escalation serializers.
"""
from rest_framework import serializers
from ..models import DiscountEscalation


class DiscountEscalationSerializer(serializers.ModelSerializer):
    """
    Used for: GET /api/discounts/escalations/pending/, GET /api/discounts/escalations/{id}/
    """
    employee_name = serializers.CharField(source='requesting_employee.full_name', read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True, default=None)
    product_sku = serializers.CharField(source='product.sku', read_only=True, default=None)
    reviewed_by_name = serializers.CharField(source='reviewed_by.full_name', read_only=True, default=None)

    class Meta:
        model = DiscountEscalation
        fields = [
            'id', 'requesting_employee', 'employee_name', 'product', 'product_name', 'product_sku',
            'requested_discount_pct', 'original_price', 'product_cost', 'margin_after_pct',
            'commission_impact', 'reason', 'denial_code', 'status', 'reviewed_by',
            'reviewed_by_name', 'review_notes', 'reviewed_at', 'applied_transaction',
            'created_at'
        ]
        read_only_fields = fields


class EscalationReviewSerializer(serializers.Serializer):
    """
    Used for: POST /api/discounts/escalations/{id}/approve/ and .../deny/
    """
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class EscalationApplySerializer(serializers.Serializer):
    """
    Used for: POST /api/discounts/escalations/{id}/apply/
    """
    sale_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
    sale_item_id = serializers.CharField(max_length=64, required=False, allow_null=True, allow_blank=True)
