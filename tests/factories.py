"""
Test factories for creating test data using factory_boy.
"""
from datetime import timedelta
from decimal import Decimal

import factory
from django.contrib.auth import get_user_model
from factory import Faker
from factory.django import DjangoModelFactory

from apps.discounts.models import AuthorityTier, DiscountBudget
from apps.products.models import CommissionRule, Product

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating test employees."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"employee{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = Faker('first_name')
    last_name = Faker('last_name')
    employee_number = factory.Sequence(lambda n: f"E{n:05d}")
    role = 'staff'
    is_active = True
    password = factory.PostGenerationMethodCall('set_password', 'testpass123')


class AuthorityTierFactory(DjangoModelFactory):

    class Meta:
        model = AuthorityTier
        django_get_or_create = ('role_name',)

    role_name = 'staff'
    display_name = factory.LazyAttribute(lambda obj: obj.role_name.title())
    max_discount_pct_standard = Decimal('10')
    max_discount_pct_high_margin = Decimal('25')
    high_margin_threshold_pct = Decimal('30')
    min_margin_floor_pct = Decimal('0')
    requires_approval_below_margin_pct = None
    is_unrestricted = False
    default_weekly_budget = Decimal('500.00')


class ProductFactory(DjangoModelFactory):

    class Meta:
        model = Product

    sku = factory.Sequence(lambda n: f"SKU-{n:06d}")
    name = factory.Sequence(lambda n: f"Front Load Washer {n}")
    category = 'Laundry'
    manufacturer = 'Acme'
    price = Decimal('500.00')
    cost = Decimal('250.00')


class CommissionRuleFactory(DjangoModelFactory):

    class Meta:
        model = CommissionRule

    product_category = None
    commission_percent = Decimal('5.00')
    description = 'Default commission'
    is_active = True


class DiscountBudgetFactory(DjangoModelFactory):
    """Budget for the current week unless period_start is given."""

    class Meta:
        model = DiscountBudget

    employee = factory.SubFactory(UserFactory)
    period_start = factory.LazyFunction(lambda: DiscountBudget.week_bounds()[0])
    period_end = factory.LazyAttribute(lambda obj: obj.period_start + timedelta(days=6))
    total_budget = Decimal('500.00')
    used_amount = Decimal('0.00')
