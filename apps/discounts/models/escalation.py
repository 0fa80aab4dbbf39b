from django.conf import settings
from django.db import models


class DiscountEscalation(models.Model):
    """Manager review case for a discount the requester was not allowed to grant"""
    STATUS_PENDING = 'pending'
    STATUS_APPROVED = 'approved'
    STATUS_DENIED = 'denied'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_DENIED, 'Denied'),
    ]

    requesting_employee = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='discount_escalations'
    )
    product = models.ForeignKey(
        'products.Product', on_delete=models.SET_NULL, null=True, blank=True,
        related_name='discount_escalations'
    )
    requested_discount_pct = models.DecimalField(max_digits=5, decimal_places=2)
    original_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    product_cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    margin_after_pct = models.DecimalField(max_digits=16, decimal_places=1, null=True, blank=True)
    commission_impact = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    reason = models.CharField(max_length=255, null=True, blank=True)
    denial_code = models.CharField(max_length=30, blank=True, default='')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, null=True, blank=True,
        related_name='reviewed_discount_escalations'
    )
    review_notes = models.TextField(null=True, blank=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)
    applied_transaction = models.OneToOneField(
        'DiscountTransaction', on_delete=models.PROTECT, null=True, blank=True,
        related_name='escalation'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'discount_escalations'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['status', 'created_at'], name='discount_es_status_3c9f0e_idx'),
        ]

    def __str__(self):
        return f"Escalation #{self.pk} {self.requested_discount_pct}% ({self.status})"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING

    @property
    def is_approved(self):
        return self.status == self.STATUS_APPROVED

    @property
    def is_denied(self):
        return self.status == self.STATUS_DENIED
