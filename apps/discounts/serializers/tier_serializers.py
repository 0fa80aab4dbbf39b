"""
Authority tier serializers.
"""
from rest_framework import serializers
from ..models import AuthorityTier


class AuthorityTierSerializer(serializers.ModelSerializer):
    """
    Used for: GET /api/discounts/tiers/
    """

    class Meta:
        model = AuthorityTier
        fields = [
            'id', 'role_name', 'display_name',
            'max_discount_pct_standard', 'max_discount_pct_high_margin',
            'high_margin_threshold_pct', 'min_margin_floor_pct',
            'requires_approval_below_margin_pct', 'is_unrestricted',
            'default_weekly_budget', 'version', 'updated_at'
        ]
        read_only_fields = fields


class AuthorityTierUpdateSerializer(serializers.Serializer):
    """
    Partial policy update.
    Used for: PATCH /api/discounts/tiers/{role}/
    """
    max_discount_pct_standard = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False)
    max_discount_pct_high_margin = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False)
    high_margin_threshold_pct = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=100, required=False)
    min_margin_floor_pct = serializers.DecimalField(max_digits=5, decimal_places=2, min_value=0, max_value=999, required=False)
    requires_approval_below_margin_pct = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=-100, max_value=100, required=False, allow_null=True
    )
    is_unrestricted = serializers.BooleanField(required=False)
    default_weekly_budget = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True
    )

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide at least one policy field to update")
        return attrs
