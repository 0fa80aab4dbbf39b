"""
Discount budget views.
"""
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from ..permissions import IsDiscountApprover
from ..serializers import DiscountBudgetSerializer, BudgetInitializeSerializer
from ..services import BudgetLedger, TierResolver

User = get_user_model()


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_budget(request):
    """This week's budget for the signed-in employee"""
    budget = BudgetLedger.get_current_budget(request.user)
    tier = TierResolver.get_tier_for_employee(request.user)
    if budget is None:
        # No tier, no allowance
        return success_response({
            'initialized': False,
            'no_tier': tier is None,
            'unrestricted': bool(tier and tier.is_unrestricted),
            'remaining_amount': BudgetLedger.get_remaining_budget(request.user, tier) if tier else None,
        }, 'Budget not initialized for this week')

    data = DiscountBudgetSerializer(budget).data
    data['initialized'] = True
    data['no_tier'] = tier is None
    return success_response(data)


@api_view(['POST'])
@permission_classes([IsDiscountApprover])
def initialize_budget(request):
    """Create this week's budget for an employee; a second call returns the existing row"""
    serializer = BudgetInitializeSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    employee = User.objects.filter(pk=serializer.validated_data['employee_id']).first()
    if employee is None:
        return error_response('Employee not found', status_code=status.HTTP_404_NOT_FOUND)

    budget, created = BudgetLedger.initialize_budget(
        employee, serializer.validated_data.get('total_budget')
    )
    data = DiscountBudgetSerializer(budget).data
    data['created'] = created
    if created:
        return success_response(data, 'Budget initialized', status_code=status.HTTP_201_CREATED)
    return success_response(data, 'Budget already initialized')
