from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils import timezone


class DiscountBudget(models.Model):
    """One employee's discount spending for one Monday-to-Sunday week"""
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='discount_budgets'
    )
    period_start = models.DateField()
    period_end = models.DateField()
    total_budget = models.DecimalField(max_digits=10, decimal_places=2)
    # Only BudgetLedger.debit writes this, under a row lock
    used_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'discount_budgets'
        ordering = ['-period_start']
        constraints = [
            models.UniqueConstraint(fields=['employee', 'period_start'], name='uniq_budget_employee_period'),
        ]

    def __str__(self):
        return f"{self.employee} {self.period_start}: {self.used_amount}/{self.total_budget}"

    @property
    def remaining_amount(self):
        return Decimal(self.total_budget) - Decimal(self.used_amount)

    @staticmethod
    def week_bounds(day=None):
        """Monday and Sunday of the week containing ``day`` (today by default)"""
        day = day or timezone.localdate()
        start = day - timedelta(days=day.weekday())
        return start, start + timedelta(days=6)
