"""
Discount authority views module.

All views are exported from this module to maintain backward compatibility.
"""
from .discount_views import validate_discount, apply_discount, list_my_transactions
from .budget_views import get_current_budget, initialize_budget
from .escalation_views import (
    create_escalation, pending_escalations, escalation_detail,
    approve_escalation, deny_escalation, apply_escalation
)
from .tier_views import list_tiers, update_tier

__all__ = [
    'validate_discount',
    'apply_discount',
    'list_my_transactions',
    'get_current_budget',
    'initialize_budget',
    'create_escalation',
    'pending_escalations',
    'escalation_detail',
    'approve_escalation',
    'deny_escalation',
    'apply_escalation',
    'list_tiers',
    'update_tier',
]
