"""
Discount authority models module.

All models are exported from this module to maintain backward compatibility.
"""
from .tier import AuthorityTier
from .budget import DiscountBudget
from .transaction import DiscountTransaction
from .escalation import DiscountEscalation

__all__ = [
    'AuthorityTier',
    'DiscountBudget',
    'DiscountTransaction',
    'DiscountEscalation',
]
