"""
Tests for the tier and budget setup commands.
"""
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from apps.discounts.models import AuthorityTier, DiscountBudget
from tests.factories import UserFactory


@pytest.mark.django_db
class TestSetupAuthorityTiers:

    def test_creates_default_tiers(self):
        out = StringIO()
        call_command('setup_authority_tiers', stdout=out)

        staff = AuthorityTier.objects.get(role_name='staff')
        assert staff.max_discount_pct_standard == Decimal('10.00')
        assert staff.requires_approval_below_margin_pct == Decimal('15.00')
        assert AuthorityTier.objects.get(role_name='master').is_unrestricted
        assert '3 created' in out.getvalue()

    def test_rerun_only_touches_changed_tiers(self):
        call_command('setup_authority_tiers', stdout=StringIO())
        AuthorityTier.objects.filter(role_name='manager').update(max_discount_pct_standard=Decimal('99'))

        out = StringIO()
        call_command('setup_authority_tiers', stdout=out)

        manager = AuthorityTier.objects.get(role_name='manager')
        assert manager.max_discount_pct_standard == Decimal('20.00')
        assert manager.version == 2
        assert AuthorityTier.objects.get(role_name='staff').version == 1
        assert '0 created, 1 updated' in out.getvalue()


@pytest.mark.django_db
class TestInitializeDiscountBudgets:

    def test_opens_budgets_for_restricted_employees(self, tiers):
        staff = UserFactory(role='staff')
        manager = UserFactory(role='manager')
        owner = UserFactory(role='master')
        UserFactory(role='staff', is_active=False)

        out = StringIO()
        call_command('initialize_discount_budgets', stdout=out)

        assert DiscountBudget.objects.get(employee=staff).total_budget == Decimal('500.00')
        assert DiscountBudget.objects.get(employee=manager).total_budget == Decimal('2000.00')
        assert not DiscountBudget.objects.filter(employee=owner).exists()
        assert DiscountBudget.objects.count() == 2
        assert '2 created, 0 already open, 1 skipped' in out.getvalue()

    def test_is_idempotent_and_filters_by_role(self, tiers):
        UserFactory(role='staff')
        UserFactory(role='manager')

        call_command('initialize_discount_budgets', '--role', 'staff', stdout=StringIO())
        assert DiscountBudget.objects.count() == 1

        out = StringIO()
        call_command('initialize_discount_budgets', stdout=out)
        assert DiscountBudget.objects.count() == 2
        assert '1 created, 1 already open, 0 skipped' in out.getvalue()
