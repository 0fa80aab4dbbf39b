"""
Product models module.

All models are exported from this module to maintain backward compatibility.
"""
from .product import Product
from .commission_rule import CommissionRule

__all__ = [
    'Product',
    'CommissionRule',
]
