from django.db import models


class CommissionRule(models.Model):
    """Sales commission percent per product category; a blank category is the catch-all"""
    product_category = models.CharField(max_length=100, null=True, blank=True, db_index=True)
    commission_percent = models.DecimalField(max_digits=5, decimal_places=2)
    description = models.CharField(max_length=200, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'commission_rules'
        ordering = ['product_category']

    def __str__(self):
        return f"{self.product_category or 'Default'}: {self.commission_percent}%"
