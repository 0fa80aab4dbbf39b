from django.contrib import admin
from .models import AuthorityTier, DiscountBudget, DiscountTransaction, DiscountEscalation


@admin.register(AuthorityTier)
class AuthorityTierAdmin(admin.ModelAdmin):
    list_display = [
        'role_name', 'display_name', 'max_discount_pct_standard', 'max_discount_pct_high_margin',
        'min_margin_floor_pct', 'is_unrestricted', 'default_weekly_budget', 'version'
    ]
    list_filter = ['is_unrestricted']
    search_fields = ['role_name', 'display_name']
    readonly_fields = ['version', 'created_at', 'updated_at']

    def save_model(self, request, obj, form, change):
        if change and form.changed_data:
            obj.version += 1
        super().save_model(request, obj, form, change)


@admin.register(DiscountBudget)
class DiscountBudgetAdmin(admin.ModelAdmin):
    list_display = ['employee', 'period_start', 'period_end', 'total_budget', 'used_amount', 'remaining_amount']
    list_filter = ['period_start']
    search_fields = ['employee__username', 'employee__employee_number']
    readonly_fields = ['used_amount', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False  # Budgets are opened by the ledger


@admin.register(DiscountTransaction)
class DiscountTransactionAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'employee', 'product', 'discount_pct', 'discount_amount',
        'margin_after_pct', 'was_auto_approved', 'approved_by', 'created_at'
    ]
    list_filter = ['was_auto_approved', 'required_manager_approval', 'created_at']
    search_fields = ['employee__username', 'sale_id', 'product__sku']
    readonly_fields = ['created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(DiscountEscalation)
class DiscountEscalationAdmin(admin.ModelAdmin):
    list_display = [
        'id', 'requesting_employee', 'product', 'requested_discount_pct',
        'denial_code', 'status', 'reviewed_by', 'created_at'
    ]
    list_filter = ['status', 'denial_code', 'created_at']
    search_fields = ['requesting_employee__username', 'reason']
    readonly_fields = [
        'requesting_employee', 'product', 'requested_discount_pct', 'original_price', 'product_cost',
        'margin_after_pct', 'commission_impact', 'reason', 'denial_code', 'status',
        'reviewed_by', 'reviewed_at', 'applied_transaction', 'created_at', 'updated_at'
    ]

    def has_add_permission(self, request):
        return False  # Reviews go through the API so transitions stay conditional
