from django.db import models


class AuthorityTier(models.Model):
    """Discount authority policy attached to an employee role"""
    role_name = models.CharField(max_length=30, unique=True)
    display_name = models.CharField(max_length=50, blank=True)
    max_discount_pct_standard = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    max_discount_pct_high_margin = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    high_margin_threshold_pct = models.DecimalField(
        max_digits=5, decimal_places=2, default=30,
        help_text="Margin-before at or above which the high-margin ceiling applies"
    )
    min_margin_floor_pct = models.DecimalField(
        max_digits=5, decimal_places=2, default=0,
        help_text="Discounted price may never fall below cost marked up by this percent"
    )
    requires_approval_below_margin_pct = models.DecimalField(
        max_digits=5, decimal_places=2, null=True, blank=True,
        help_text="Post-discount margin below this needs a manager even inside the ceiling"
    )
    is_unrestricted = models.BooleanField(default=False)
    default_weekly_budget = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Columns an administrator may change through update_tier
    POLICY_FIELDS = (
        'max_discount_pct_standard',
        'max_discount_pct_high_margin',
        'high_margin_threshold_pct',
        'min_margin_floor_pct',
        'requires_approval_below_margin_pct',
        'is_unrestricted',
        'default_weekly_budget',
    )

    class Meta:
        db_table = 'discount_authority_tiers'
        ordering = ['role_name']

    def __str__(self):
        return self.display_name or self.role_name

    def max_allowed_pct(self, is_high_margin):
        if is_high_margin:
            return self.max_discount_pct_high_margin
        return self.max_discount_pct_standard
