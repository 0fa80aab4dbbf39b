"""
Test configuration for the point-of-sale discount server.
"""
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from tests.factories import AuthorityTierFactory, UserFactory


@pytest.fixture
def staff_tier(db):
    """Standard-margin ceiling 10%, high-margin 25%, no floor, no approval threshold"""
    return AuthorityTierFactory(
        role_name='staff',
        display_name='Sales Staff',
        max_discount_pct_standard=Decimal('10'),
        max_discount_pct_high_margin=Decimal('25'),
        high_margin_threshold_pct=Decimal('30'),
        min_margin_floor_pct=Decimal('0'),
        requires_approval_below_margin_pct=None,
        default_weekly_budget=Decimal('500.00'),
    )


@pytest.fixture
def manager_tier(db):
    return AuthorityTierFactory(
        role_name='manager',
        display_name='Store Manager',
        max_discount_pct_standard=Decimal('20'),
        max_discount_pct_high_margin=Decimal('30'),
        high_margin_threshold_pct=Decimal('30'),
        min_margin_floor_pct=Decimal('5'),
        requires_approval_below_margin_pct=None,
        default_weekly_budget=Decimal('2000.00'),
    )


@pytest.fixture
def master_tier(db):
    return AuthorityTierFactory(
        role_name='master',
        display_name='Owner',
        max_discount_pct_standard=Decimal('100'),
        max_discount_pct_high_margin=Decimal('100'),
        is_unrestricted=True,
        default_weekly_budget=None,
    )


@pytest.fixture
def tiers(staff_tier, manager_tier, master_tier):
    return {'staff': staff_tier, 'manager': manager_tier, 'master': master_tier}


@pytest.fixture
def staff_user(db):
    return UserFactory(role='staff')


@pytest.fixture
def manager_user(db):
    return UserFactory(role='manager')


@pytest.fixture
def master_user(db):
    return UserFactory(role='master')


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for(api_client):
    """Return an APIClient authenticated as the given user"""
    def _client_for(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _client_for
