"""
Margin and pricing arithmetic for discount decisions.

All figures are Decimal and stay unrounded while they are chained together;
``to_currency`` and ``to_percent`` are applied only when a figure is reported.
"""
from decimal import Decimal, ROUND_HALF_UP

HUNDRED = Decimal('100')
CENT = Decimal('0.01')
TENTH = Decimal('0.1')


def to_decimal(value):
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class MarginCalculator:
    """Pure functions, no I/O"""

    @staticmethod
    def margin_before_pct(price, cost):
        price, cost = to_decimal(price), to_decimal(cost)
        if price <= 0:
            return Decimal('0')
        return (price - cost) / price * HUNDRED

    @staticmethod
    def discounted_price(price, discount_pct):
        return to_decimal(price) * (1 - to_decimal(discount_pct) / HUNDRED)

    @staticmethod
    def discount_amount(price, discount_pct):
        return to_decimal(price) * to_decimal(discount_pct) / HUNDRED

    @staticmethod
    def margin_after_pct(price, cost, discount_pct):
        """Margin left after the discount, measured against the original price"""
        price, cost = to_decimal(price), to_decimal(cost)
        if price <= 0:
            return Decimal('0')
        discounted = MarginCalculator.discounted_price(price, discount_pct)
        return (discounted - cost) / price * HUNDRED

    @staticmethod
    def cost_floor_price(cost, min_margin_floor_pct):
        return to_decimal(cost) * (1 + to_decimal(min_margin_floor_pct) / HUNDRED)

    @staticmethod
    def commission_impact(price_before, price_after, commission_rate):
        """Change in commission caused by the discount; negative when commission drops"""
        return (to_decimal(price_after) - to_decimal(price_before)) * to_decimal(commission_rate)

    @staticmethod
    def to_currency(value):
        if value is None:
            return None
        return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)

    @staticmethod
    def to_percent(value):
        if value is None:
            return None
        return to_decimal(value).quantize(TENTH, rounding=ROUND_HALF_UP)
