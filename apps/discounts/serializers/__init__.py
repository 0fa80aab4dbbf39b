"""
Discount authority serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .tier_serializers import AuthorityTierSerializer, AuthorityTierUpdateSerializer
from .budget_serializers import DiscountBudgetSerializer, BudgetInitializeSerializer
from .discount_serializers import (
    DiscountRequestSerializer, DiscountDecisionSerializer, DiscountTransactionSerializer
)
from .escalation_serializers import (
    DiscountEscalationSerializer, EscalationReviewSerializer, EscalationApplySerializer
)

__all__ = [
    'AuthorityTierSerializer',
    'AuthorityTierUpdateSerializer',
    'DiscountBudgetSerializer',
    'BudgetInitializeSerializer',
    'DiscountRequestSerializer',
    'DiscountDecisionSerializer',
    'DiscountTransactionSerializer',
    'DiscountEscalationSerializer',
    'EscalationReviewSerializer',
    'EscalationApplySerializer',
]
