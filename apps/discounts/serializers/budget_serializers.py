"""
Discount budget serializers.
"""
from rest_framework import serializers
from ..models import DiscountBudget


class DiscountBudgetSerializer(serializers.ModelSerializer):
    """
    Used for: GET /api/discounts/budget/
    """
    remaining_amount = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    employee_name = serializers.CharField(source='employee.full_name', read_only=True)

    class Meta:
        model = DiscountBudget
        fields = [
            'id', 'employee', 'employee_name', 'period_start', 'period_end',
            'total_budget', 'used_amount', 'remaining_amount', 'updated_at'
        ]
        read_only_fields = fields


class BudgetInitializeSerializer(serializers.Serializer):
    """
    Used for: POST /api/discounts/budget/initialize/
    """
    employee_id = serializers.IntegerField()
    total_budget = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, allow_null=True)
