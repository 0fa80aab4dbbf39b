from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Employee admin with role and budget summary"""
    list_display = [
        'username', 'email', 'employee_number', 'role',
        'is_active', 'is_staff', 'created_at'
    ]
    list_filter = ['role', 'is_staff', 'is_superuser', 'is_active', 'created_at']
    search_fields = ['username', 'email', 'phone', 'employee_number']
    ordering = ['-created_at']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Point of Sale', {
            'fields': ('role', 'employee_number', 'phone', 'current_budget')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    readonly_fields = ['created_at', 'updated_at', 'current_budget']

    def current_budget(self, obj):
        """Show this week's discount budget usage"""
        from apps.discounts.services import BudgetLedger
        budget = BudgetLedger.get_current_budget(obj)
        if not budget:
            return "Not initialized"
        return f"{budget.used_amount} / {budget.total_budget} used"
    current_budget.short_description = 'Discount Budget'
