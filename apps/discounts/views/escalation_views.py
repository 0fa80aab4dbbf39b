"""
Discount escalation views: create, review, apply.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from ..permissions import IsDiscountApprover
from ..serializers import (
    DiscountRequestSerializer, DiscountEscalationSerializer,
    EscalationReviewSerializer, EscalationApplySerializer
)
from ..services import DiscountService, DiscountValidationService, EscalationService


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_escalation(request):
    """Ask a manager to approve a discount up front"""
    serializer = DiscountRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    data = serializer.validated_data
    discount_request, not_found = DiscountValidationService.build_request(
        employee=request.user,
        discount_pct=data['discount_pct'],
        product_id=data.get('product_id'),
        original_price=data.get('original_price'),
        cost=data.get('cost'),
        reason=data.get('reason') or None,
    )
    if not_found:
        return error_response(not_found.reason, status_code=status.HTTP_404_NOT_FOUND)

    decision = DiscountValidationService.validate_discount(discount_request)
    escalation = EscalationService.create_escalation(
        employee=request.user,
        discount_pct=discount_request.discount_pct,
        product_id=discount_request.product_id,
        reason=discount_request.reason or decision.escalation_reason,
        margin_after=decision.margin_after,
        commission_impact=(decision.calculations or {}).get('commission_impact'),
        original_price=discount_request.original_price,
        product_cost=discount_request.cost,
        denial_code='' if decision.allowed else decision.reason_code,
    )
    return success_response(
        DiscountEscalationSerializer(escalation).data, 'Escalation created',
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET'])
@permission_classes([IsDiscountApprover])
def pending_escalations(request):
    escalations = EscalationService.get_pending_escalations()
    return success_response(DiscountEscalationSerializer(escalations, many=True).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def escalation_detail(request, escalation_id):
    escalation = EscalationService.get_escalation(escalation_id)
    if escalation is None:
        return error_response('Escalation not found', status_code=status.HTTP_404_NOT_FOUND)
    if escalation.requesting_employee_id != request.user.pk and not request.user.can_review_discounts:
        return error_response('Permission denied', status_code=status.HTTP_403_FORBIDDEN)
    return success_response(DiscountEscalationSerializer(escalation).data)


def _review(request, escalation_id, action):
    serializer = EscalationReviewSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    notes = serializer.validated_data.get('notes')
    if action == 'approve':
        escalation = EscalationService.approve_escalation(escalation_id, request.user, notes)
    else:
        escalation = EscalationService.deny_escalation(escalation_id, request.user, notes)

    if escalation is None:
        return error_response('Escalation not found or not pending', status_code=status.HTTP_409_CONFLICT)
    return success_response(DiscountEscalationSerializer(escalation).data, f'Escalation {escalation.status}')


@api_view(['POST'])
@permission_classes([IsDiscountApprover])
def approve_escalation(request, escalation_id):
    return _review(request, escalation_id, 'approve')


@api_view(['POST'])
@permission_classes([IsDiscountApprover])
def deny_escalation(request, escalation_id):
    return _review(request, escalation_id, 'deny')


@api_view(['POST'])
@permission_classes([IsDiscountApprover])
def apply_escalation(request, escalation_id):
    """Apply an approved escalation's discount under the reviewing manager's authority"""
    serializer = EscalationApplySerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    result = DiscountService.apply_approved_escalation(
        escalation_id,
        request.user,
        sale_id=serializer.validated_data.get('sale_id') or None,
        sale_item_id=serializer.validated_data.get('sale_item_id') or None,
    )
    if result['approved']:
        return success_response(result, 'Discount applied', status_code=status.HTTP_201_CREATED)
    return error_response(result['reason'], status_code=status.HTTP_409_CONFLICT, data=result)
