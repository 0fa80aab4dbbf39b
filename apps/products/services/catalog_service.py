"""
Catalog lookups used by the discount engine: product pricing and commission rates.
"""
from decimal import Decimal

from django.conf import settings
from django.db.models import Q

from ..models import Product, CommissionRule

CENTS = Decimal('100')


class CatalogService:
    """Read-only access to product pricing and commission rules"""

    @staticmethod
    def resolve_price(product):
        """Dollar price, else MSRP cents, else retail cents, else zero"""
        if product.price:
            return Decimal(product.price)
        if product.msrp_cents:
            return Decimal(product.msrp_cents) / CENTS
        if product.retail_price_cents:
            return Decimal(product.retail_price_cents) / CENTS
        return Decimal('0')

    @staticmethod
    def resolve_cost(product):
        if product.cost:
            return Decimal(product.cost)
        if product.cost_cents:
            return Decimal(product.cost_cents) / CENTS
        return Decimal('0')

    @staticmethod
    def get_product(product_id):
        if product_id is None:
            return None
        return Product.objects.filter(pk=product_id).first()

    @staticmethod
    def get_product_pricing(product_id):
        """
        Look up a product and resolve its pricing.

        Returns a dict with ``product``, ``price``, ``cost`` and ``category``,
        or None when the product does not exist.
        """
        product = CatalogService.get_product(product_id)
        if not product:
            return None
        return {
            'product': product,
            'price': CatalogService.resolve_price(product),
            'cost': CatalogService.resolve_cost(product),
            'category': product.category,
        }

    @staticmethod
    def get_commission_rate(category):
        """
        Commission rate as a fraction (0.05 == 5%).

        A rule for the exact category wins over the catch-all rule; with no
        active rule at all the configured default applies.
        """
        rules = CommissionRule.objects.filter(is_active=True).order_by('id')
        rule = None
        if category:
            rule = rules.filter(product_category=category).first()
        if rule is None:
            rule = rules.filter(Q(product_category__isnull=True) | Q(product_category='')).first()

        if rule:
            return Decimal(rule.commission_percent) / CENTS
        return settings.DISCOUNT_AUTHORITY['DEFAULT_COMMISSION_RATE']
