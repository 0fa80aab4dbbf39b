from django.conf import settings
from django.db import models


class DiscountTransaction(models.Model):
    """Audit record of a committed discount. Written once, never changed."""
    sale_id = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    sale_item_id = models.CharField(max_length=64, null=True, blank=True)
    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='discount_transactions'
    )
    product = models.ForeignKey(
        'products.Product', on_delete=models.SET_NULL, null=True, blank=True,
        related_name='discount_transactions'
    )
    original_price = models.DecimalField(max_digits=10, decimal_places=2)
    product_cost = models.DecimalField(max_digits=10, decimal_places=2)
    discount_pct = models.DecimalField(max_digits=5, decimal_places=2)
    discount_amount = models.DecimalField(max_digits=10, decimal_places=2)
    price_after_discount = models.DecimalField(max_digits=10, decimal_places=2)
    margin_before_pct = models.DecimalField(max_digits=16, decimal_places=1)
    margin_after_pct = models.DecimalField(max_digits=16, decimal_places=1)
    commission_impact = models.DecimalField(max_digits=10, decimal_places=2)
    was_auto_approved = models.BooleanField(default=True)
    required_manager_approval = models.BooleanField(default=False)
    approval_reason = models.CharField(max_length=255, null=True, blank=True)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, null=True, blank=True,
        related_name='approved_discount_transactions'
    )
    budget_period = models.ForeignKey(
        'DiscountBudget', on_delete=models.PROTECT, null=True, blank=True, related_name='transactions'
    )
    tier_version = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'discount_transactions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['employee', 'created_at'], name='discount_tr_employe_6a1d2b_idx'),
        ]

    def __str__(self):
        return f"{self.employee} -{self.discount_pct}% on {self.original_price} ({self.discount_amount})"

    def save(self, *args, **kwargs):
        if self.pk is not None and not self._state.adding:
            raise ValueError("Discount transactions are append-only")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Discount transactions are append-only")
