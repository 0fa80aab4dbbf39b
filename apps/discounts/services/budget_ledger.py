"""
Weekly discount budget ledger.

Reads are lock-free. Debits lock the employee's current budget row and must
run inside the caller's ``transaction.atomic()`` block.
"""
import logging
from decimal import Decimal

from django.conf import settings
from django.db.models import F
from django.utils import timezone

from ..models import DiscountBudget
from .margin_calculator import to_decimal
from .tier_resolver import TierResolver

logger = logging.getLogger(__name__)


class BudgetLedger:
    """Owns every write to DiscountBudget.used_amount"""

    @staticmethod
    def _current_period(employee, day=None):
        day = day or timezone.localdate()
        return DiscountBudget.objects.filter(
            employee=employee,
            period_start__lte=day,
            period_end__gte=day
        ).order_by('-period_start')

    @staticmethod
    def get_current_budget(employee):
        """Budget row whose week contains today, or None"""
        return BudgetLedger._current_period(employee).first()

    @staticmethod
    def default_budget_for(employee, tier=None):
        """Weekly allowance for the employee's role, falling back to the site default"""
        tier = tier or TierResolver.get_tier_for_employee(employee)
        if tier and tier.default_weekly_budget is not None:
            return Decimal(tier.default_weekly_budget)
        return settings.DISCOUNT_AUTHORITY['DEFAULT_WEEKLY_BUDGET']

    @staticmethod
    def get_remaining_budget(employee, tier=None):
        """
        Remaining allowance for this week.

        An employee whose week has not been initialised yet has the full
        default allowance, which is what initialize_budget would create.
        """
        budget = BudgetLedger.get_current_budget(employee)
        if budget:
            return budget.remaining_amount
        return BudgetLedger.default_budget_for(employee, tier)

    @staticmethod
    def initialize_budget(employee, total_budget=None, tier=None):
        """
        Create this week's budget row if it does not exist yet.

        Safe to call concurrently: the unique (employee, period_start)
        constraint turns a losing insert into a re-read of the winner's row.
        Returns ``(budget, created)``.
        """
        period_start, period_end = DiscountBudget.week_bounds()
        if total_budget is None:
            total_budget = BudgetLedger.default_budget_for(employee, tier)

        budget, created = DiscountBudget.objects.get_or_create(
            employee=employee,
            period_start=period_start,
            defaults={
                'period_end': period_end,
                'total_budget': to_decimal(total_budget),
                'used_amount': Decimal('0'),
            }
        )
        if created:
            logger.info(
                "Initialized discount budget employee=%s period=%s total=%s",
                employee.pk, period_start, budget.total_budget
            )
        return budget, created

    @staticmethod
    def lock_current_budget(employee):
        """SELECT ... FOR UPDATE on the current row; call inside transaction.atomic()"""
        return BudgetLedger._current_period(employee).select_for_update().first()

    @staticmethod
    def lock_budget(budget_id):
        """SELECT ... FOR UPDATE on one budget row by id; call inside transaction.atomic()"""
        return DiscountBudget.objects.select_for_update().get(pk=budget_id)

    @staticmethod
    def debit(employee, amount, budget=None):
        """
        Add ``amount`` to a budget's used total under a row lock.

        ``budget`` pins the row to debit; without it the row covering today
        is used. Returns the refreshed budget, or None when the employee has
        no budget row this week (nothing is debited). Raises ValueError if
        the debit would overrun the budget so the enclosing transaction
        rolls back.
        """
        amount = to_decimal(amount)
        if amount < 0:
            raise ValueError("Debit amount must not be negative")

        if budget is not None:
            budget = BudgetLedger.lock_budget(budget.pk)
        else:
            budget = BudgetLedger.lock_current_budget(employee)
        if budget is None:
            logger.warning("No discount budget for employee=%s this week, debit of %s skipped", employee.pk, amount)
            return None

        if amount > budget.remaining_amount:
            raise ValueError(
                f"Debit {amount} exceeds remaining budget {budget.remaining_amount} for employee {employee.pk}"
            )

        DiscountBudget.objects.filter(pk=budget.pk).update(
            used_amount=F('used_amount') + amount,
            updated_at=timezone.now()
        )
        budget.refresh_from_db(fields=['used_amount', 'updated_at'])
        return budget
