from django.contrib import admin
from .models import Product, CommissionRule


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['sku', 'name', 'category', 'price', 'cost', 'is_active', 'updated_at']
    list_filter = ['is_active', 'category', 'manufacturer']
    search_fields = ['sku', 'name', 'manufacturer']


@admin.register(CommissionRule)
class CommissionRuleAdmin(admin.ModelAdmin):
    list_display = ['product_category', 'commission_percent', 'is_active', 'updated_at']
    list_filter = ['is_active']
    search_fields = ['product_category', 'description']
    list_editable = ['is_active']
