"""
Discount authority services module.

All services are exported from this module to maintain backward compatibility.
"""
from .margin_calculator import MarginCalculator
from .tier_resolver import TierResolver
from .budget_ledger import BudgetLedger
from .validation_service import DiscountDecision, DiscountRequest, DiscountValidationService
from .escalation_service import EscalationService
from .discount_service import DiscountService

__all__ = [
    'MarginCalculator',
    'TierResolver',
    'BudgetLedger',
    'DiscountDecision',
    'DiscountRequest',
    'DiscountValidationService',
    'EscalationService',
    'DiscountService',
]
