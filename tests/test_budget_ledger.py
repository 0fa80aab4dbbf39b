"""
Tests for the weekly discount budget ledger.
"""
from datetime import timedelta
from decimal import Decimal

import pytest
from django.db import transaction
from django.utils import timezone

from apps.discounts.models import DiscountBudget
from apps.discounts.services import BudgetLedger
from tests.factories import DiscountBudgetFactory, UserFactory


@pytest.mark.django_db
class TestBudgetInitialisation:

    def test_creates_current_week_with_tier_default(self, staff_tier, staff_user):
        budget, created = BudgetLedger.initialize_budget(staff_user)

        assert created
        assert budget.total_budget == Decimal('500.00')
        assert budget.used_amount == Decimal('0')
        assert budget.period_start.weekday() == 0
        assert budget.period_end - budget.period_start == timedelta(days=6)
        assert budget.period_start <= timezone.localdate() <= budget.period_end

    def test_manager_default_comes_from_manager_tier(self, manager_tier, manager_user):
        budget, _ = BudgetLedger.initialize_budget(manager_user)
        assert budget.total_budget == Decimal('2000.00')

    def test_employee_without_tier_gets_site_default(self, db):
        employee = UserFactory(role='cashier')
        budget, _ = BudgetLedger.initialize_budget(employee)
        assert budget.total_budget == Decimal('500.00')

    def test_explicit_total_wins(self, staff_tier, staff_user):
        budget, _ = BudgetLedger.initialize_budget(staff_user, Decimal('125.50'))
        assert budget.total_budget == Decimal('125.50')

    def test_second_call_returns_existing_row(self, staff_tier, staff_user):
        first, created_first = BudgetLedger.initialize_budget(staff_user, Decimal('100'))
        second, created_second = BudgetLedger.initialize_budget(staff_user, Decimal('900'))

        assert created_first and not created_second
        assert first.pk == second.pk
        assert second.total_budget == Decimal('100.00')
        assert DiscountBudget.objects.filter(employee=staff_user).count() == 1


@pytest.mark.django_db
class TestBudgetReads:

    def test_no_current_budget(self, staff_user):
        assert BudgetLedger.get_current_budget(staff_user) is None

    def test_last_week_is_not_current(self, staff_user):
        monday = DiscountBudget.week_bounds()[0] - timedelta(days=7)
        DiscountBudgetFactory(employee=staff_user, period_start=monday)
        assert BudgetLedger.get_current_budget(staff_user) is None

    def test_remaining_without_row_is_default_allowance(self, staff_tier, staff_user):
        assert BudgetLedger.get_remaining_budget(staff_user) == Decimal('500.00')

    def test_remaining_reflects_used_amount(self, staff_tier, staff_user):
        DiscountBudgetFactory(employee=staff_user, total_budget=Decimal('100'), used_amount=Decimal('90'))
        assert BudgetLedger.get_remaining_budget(staff_user) == Decimal('10')

    def test_week_bounds(self):
        from datetime import date
        start, end = DiscountBudget.week_bounds(date(2026, 10, 22))  # Thursday
        assert start == date(2026, 10, 19)
        assert end == date(2026, 10, 25)


@pytest.mark.django_db
class TestBudgetDebit:

    def test_debit_adds_to_used_amount(self, staff_user):
        DiscountBudgetFactory(employee=staff_user, total_budget=Decimal('100'), used_amount=Decimal('90'))

        with transaction.atomic():
            budget = BudgetLedger.debit(staff_user, Decimal('5'))

        assert budget.used_amount == Decimal('95.00')
        assert budget.remaining_amount == Decimal('5.00')

    def test_debit_may_exhaust_budget_exactly(self, staff_user):
        DiscountBudgetFactory(employee=staff_user, total_budget=Decimal('100'), used_amount=Decimal('90'))
        with transaction.atomic():
            budget = BudgetLedger.debit(staff_user, Decimal('10'))
        assert budget.remaining_amount == Decimal('0')

    def test_debit_beyond_remaining_raises(self, staff_user):
        DiscountBudgetFactory(employee=staff_user, total_budget=Decimal('100'), used_amount=Decimal('90'))

        with pytest.raises(ValueError):
            with transaction.atomic():
                BudgetLedger.debit(staff_user, Decimal('10.01'))

        assert BudgetLedger.get_current_budget(staff_user).used_amount == Decimal('90.00')

    def test_negative_debit_raises(self, staff_user):
        DiscountBudgetFactory(employee=staff_user)
        with pytest.raises(ValueError):
            BudgetLedger.debit(staff_user, Decimal('-1'))

    def test_debit_without_budget_row_is_skipped(self, staff_user):
        with transaction.atomic():
            assert BudgetLedger.debit(staff_user, Decimal('5')) is None
        assert not DiscountBudget.objects.filter(employee=staff_user).exists()

    def test_debit_pinned_row_ignores_todays_week(self, staff_user):
        last_week = timezone.localdate() - timedelta(days=7)
        start, end = DiscountBudget.week_bounds(last_week)
        previous = DiscountBudgetFactory(employee=staff_user, period_start=start, period_end=end)

        with transaction.atomic():
            budget = BudgetLedger.debit(staff_user, Decimal('5'), budget=previous)

        assert budget.pk == previous.pk
        assert budget.used_amount == Decimal('5.00')
        assert BudgetLedger.get_current_budget(staff_user) is None
