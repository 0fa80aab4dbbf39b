from rest_framework.permissions import BasePermission


class IsDiscountApprover(BasePermission):
    """Managers and above: review escalations, initialise budgets"""
    message = 'Manager authority required'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.can_review_discounts)


class IsTierAdministrator(BasePermission):
    message = 'Only master or admin roles may change authority tiers'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.can_manage_tiers)
