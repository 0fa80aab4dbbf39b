"""
Discount validation engine.

Combines the employee's authority tier, the margin arithmetic and the weekly
budget into a single allow/deny decision. Policy denials are returned as
data; nothing here raises for a rule violation.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from django.conf import settings

from apps.products.services import CatalogService
from .budget_ledger import BudgetLedger
from .margin_calculator import MarginCalculator, to_decimal
from .tier_resolver import TierResolver

# Decision reason codes
WITHIN_AUTHORITY = 'within_authority'
NO_TIER = 'no_tier'
PRODUCT_NOT_FOUND = 'product_not_found'
BUDGET_EXHAUSTED = 'budget_exhausted'
BELOW_COST_FLOOR = 'below_cost_floor'
EXCEEDS_TIER_LIMIT = 'exceeds_tier_limit'
LOW_MARGIN = 'low_margin'

REASON_TEXT = {
    WITHIN_AUTHORITY: 'Within authority',
    NO_TIER: 'No discount authority tier found',
    PRODUCT_NOT_FOUND: 'Product not found',
    BUDGET_EXHAUSTED: 'Budget exhausted',
    BELOW_COST_FLOOR: 'Below cost floor',
    EXCEEDS_TIER_LIMIT: 'Exceeds tier limit',
    LOW_MARGIN: 'Low margin - escalation required',
}

# Passed as ``budget`` to validate against whatever the ledger currently holds
LOOKUP = object()


def _fmt(value):
    """Render a Decimal without trailing zeros: 10.00 -> '10', 12.50 -> '12.5'"""
    return format(to_decimal(value).normalize(), 'f')


@dataclass
class DiscountRequest:
    """A proposed line-item discount.

    ``employee`` is whose authority and budget are checked. ``sold_by`` is
    recorded on the transaction when someone else (a reviewing manager)
    applies the discount on the seller's behalf.
    """
    employee: Any
    discount_pct: Decimal
    original_price: Decimal
    cost: Decimal
    product_id: Optional[int] = None
    role: Optional[str] = None
    commission_rate: Optional[Decimal] = None
    sold_by: Any = None
    sale_id: Optional[str] = None
    sale_item_id: Optional[str] = None
    reason: Optional[str] = None

    def __post_init__(self):
        self.discount_pct = to_decimal(self.discount_pct)
        self.original_price = to_decimal(self.original_price)
        self.cost = to_decimal(self.cost)
        if self.commission_rate is None:
            self.commission_rate = settings.DISCOUNT_AUTHORITY['DEFAULT_COMMISSION_RATE']
        self.commission_rate = to_decimal(self.commission_rate)
        if self.role is None:
            self.role = getattr(self.employee, 'role', None)
        if self.sold_by is None:
            self.sold_by = self.employee


@dataclass
class DiscountDecision:
    allowed: bool
    reason_code: str
    margin_before: Optional[Decimal] = None
    margin_after: Optional[Decimal] = None
    max_allowed_pct: Optional[Decimal] = None
    escalation_required: bool = False
    escalation_reason: Optional[str] = None
    budget_remaining: Optional[Decimal] = None
    calculations: Optional[Dict[str, Any]] = None
    tier: Any = field(default=None, repr=False, compare=False)
    discount_amount: Optional[Decimal] = None

    @property
    def reason(self):
        return REASON_TEXT[self.reason_code]

    def to_dict(self):
        return {
            'allowed': self.allowed,
            'reason': self.reason,
            'reason_code': self.reason_code,
            'margin_before': self.margin_before,
            'margin_after': self.margin_after,
            'max_allowed_pct': self.max_allowed_pct,
            'escalation_required': self.escalation_required,
            'escalation_reason': self.escalation_reason,
            'budget_remaining': self.budget_remaining,
            'calculations': self.calculations,
        }


class DiscountValidationService:
    """Decides whether an employee may grant a proposed discount"""

    @staticmethod
    def build_request(employee, discount_pct, product_id=None, original_price=None, cost=None, **extra):
        """
        Assemble a DiscountRequest, filling price, cost and commission rate
        from the catalog when the caller did not supply them.

        Returns ``(request, None)``, or ``(None, decision)`` with a
        product-not-found denial when the catalog has no such product.
        """
        commission_rate = extra.pop('commission_rate', None)
        if product_id is not None and (original_price is None or cost is None or commission_rate is None):
            pricing = CatalogService.get_product_pricing(product_id)
            if pricing is None:
                if original_price is None or cost is None:
                    return None, DiscountValidationService.product_not_found()
            else:
                if original_price is None:
                    original_price = pricing['price']
                if cost is None:
                    cost = pricing['cost']
                if commission_rate is None:
                    commission_rate = CatalogService.get_commission_rate(pricing['category'])

        request = DiscountRequest(
            employee=employee,
            discount_pct=discount_pct,
            original_price=original_price,
            cost=cost,
            product_id=product_id,
            commission_rate=commission_rate,
            **extra
        )
        return request, None

    @staticmethod
    def product_not_found():
        return DiscountDecision(allowed=False, reason_code=PRODUCT_NOT_FOUND, escalation_required=False)

    @staticmethod
    def validate_product_discount(product_id, discount_pct, employee, role=None):
        """Validate a discount on a catalog product, resolving price, cost and commission"""
        request, not_found = DiscountValidationService.build_request(
            employee, discount_pct, product_id=product_id, role=role
        )
        if not_found:
            return not_found
        return DiscountValidationService.validate_discount(request)

    @staticmethod
    def validate_discount(request, budget=LOOKUP):
        """
        Run the authority checks in order; the first failing check decides.

        ``budget`` is the employee's current budget row when the caller has
        already locked it; by default the ledger is read without locking.
        """
        tier = TierResolver.get_tier(request.role)
        price, cost, pct = request.original_price, request.cost, request.discount_pct

        margin_before = MarginCalculator.margin_before_pct(price, cost)
        margin_after = MarginCalculator.margin_after_pct(price, cost, pct)
        discounted_price = MarginCalculator.discounted_price(price, pct)
        discount_amount = MarginCalculator.to_currency(MarginCalculator.discount_amount(price, pct))

        decision = DiscountDecision(
            allowed=False,
            reason_code=NO_TIER,
            margin_before=MarginCalculator.to_percent(margin_before),
            margin_after=MarginCalculator.to_percent(margin_after),
            tier=tier,
            discount_amount=discount_amount,
        )

        if tier is None:
            decision.escalation_required = True
            decision.escalation_reason = 'No tier configured for role'
            decision.calculations = DiscountValidationService._calculations(request, None, None)
            return decision

        if tier.is_unrestricted:
            decision.allowed = True
            decision.reason_code = WITHIN_AUTHORITY
            decision.calculations = DiscountValidationService._calculations(request, tier, None)
            return decision

        is_high_margin = margin_before >= to_decimal(tier.high_margin_threshold_pct)
        max_allowed_pct = to_decimal(tier.max_allowed_pct(is_high_margin))
        cost_floor_price = MarginCalculator.cost_floor_price(cost, tier.min_margin_floor_pct)

        if budget is LOOKUP:
            remaining = BudgetLedger.get_remaining_budget(request.employee, tier)
        elif budget is None:
            remaining = BudgetLedger.default_budget_for(request.employee, tier)
        else:
            remaining = budget.remaining_amount

        decision.max_allowed_pct = max_allowed_pct
        decision.budget_remaining = MarginCalculator.to_currency(remaining)
        decision.calculations = DiscountValidationService._calculations(request, tier, remaining)
        decision.escalation_required = True

        if discount_amount > remaining:
            decision.reason_code = BUDGET_EXHAUSTED
            decision.escalation_reason = (
                f"Discount ${discount_amount} exceeds remaining budget ${MarginCalculator.to_currency(remaining)}"
            )
            return decision

        if discounted_price < cost_floor_price:
            decision.reason_code = BELOW_COST_FLOOR
            decision.escalation_reason = (
                f"Price ${MarginCalculator.to_currency(discounted_price)} falls below "
                f"cost floor ${MarginCalculator.to_currency(cost_floor_price)}"
            )
            return decision

        if pct > max_allowed_pct:
            decision.reason_code = EXCEEDS_TIER_LIMIT
            decision.escalation_reason = (
                f"{_fmt(pct)}% exceeds {'high-margin' if is_high_margin else 'standard'} "
                f"max allowed {_fmt(max_allowed_pct)}%"
            )
            return decision

        approval_threshold = tier.requires_approval_below_margin_pct
        if approval_threshold is not None and margin_after < to_decimal(approval_threshold):
            decision.reason_code = LOW_MARGIN
            decision.escalation_reason = (
                f"Post-discount margin {MarginCalculator.to_percent(margin_after)}% "
                f"below threshold {_fmt(approval_threshold)}%"
            )
            return decision

        decision.allowed = True
        decision.reason_code = WITHIN_AUTHORITY
        decision.escalation_required = False
        return decision

    @staticmethod
    def _calculations(request, tier, budget_remaining):
        """Figures the terminal shows next to the decision, rounded for display"""
        price, cost, pct = request.original_price, request.cost, request.discount_pct
        to_currency, to_percent = MarginCalculator.to_currency, MarginCalculator.to_percent

        discount_amount = to_currency(MarginCalculator.discount_amount(price, pct))
        price_after = price - discount_amount
        commission_before = price * request.commission_rate
        commission_after = price_after * request.commission_rate

        max_allowed_pct = None
        cost_floor_price = None
        if tier is not None and not tier.is_unrestricted:
            is_high_margin = MarginCalculator.margin_before_pct(price, cost) >= to_decimal(tier.high_margin_threshold_pct)
            max_allowed_pct = to_decimal(tier.max_allowed_pct(is_high_margin))
            cost_floor_price = MarginCalculator.cost_floor_price(cost, tier.min_margin_floor_pct)

        return {
            'original_price': to_currency(price),
            'product_cost': to_currency(cost),
            'margin_before_discount_pct': to_percent(MarginCalculator.margin_before_pct(price, cost)),
            'margin_before_discount_dollars': to_currency(price - cost),
            'discount_amount': discount_amount,
            'price_after_discount': to_currency(price_after),
            'margin_after_discount_pct': to_percent(MarginCalculator.margin_after_pct(price, cost, pct)),
            'margin_after_discount_dollars': to_currency(price_after - cost),
            'cost_floor_price': to_currency(cost_floor_price),
            'max_allowed_discount_pct': max_allowed_pct,
            'max_allowed_discount_dollars': (
                to_currency(price * max_allowed_pct / 100) if max_allowed_pct is not None else None
            ),
            'commission_before_discount': to_currency(commission_before),
            'commission_after_discount': to_currency(commission_after),
            'commission_impact': to_currency(
                MarginCalculator.commission_impact(price, price_after, request.commission_rate)
            ),
            'budget_remaining_before': to_currency(budget_remaining),
            'budget_remaining_after': (
                to_currency(budget_remaining - discount_amount) if budget_remaining is not None else None
            ),
        }
