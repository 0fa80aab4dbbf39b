from django.db import models


class Product(models.Model):
    """Catalog product as the discount engine sees it"""
    sku = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=100, blank=True, default='', db_index=True)
    manufacturer = models.CharField(max_length=100, blank=True, default='')

    # Dollar columns are authoritative; the cent columns come from supplier
    # feeds and are only used when the dollar value is missing.
    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    cost = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    cost_cents = models.BigIntegerField(null=True, blank=True, help_text="Unit cost in cents")
    msrp_cents = models.BigIntegerField(null=True, blank=True, help_text="Manufacturer list price in cents")
    retail_price_cents = models.BigIntegerField(null=True, blank=True, help_text="Retail price in cents")

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        indexes = [
            models.Index(fields=['is_active'], name='products_is_acti_1f4e5c_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})"
