"""
Discount validation and application views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response, paginated_response
from ..models import DiscountTransaction
from ..serializers import (
    DiscountRequestSerializer, DiscountDecisionSerializer, DiscountTransactionSerializer
)
from ..services import DiscountService, DiscountValidationService


def _build_request(user, validated_data):
    return DiscountValidationService.build_request(
        employee=user,
        discount_pct=validated_data['discount_pct'],
        product_id=validated_data.get('product_id'),
        original_price=validated_data.get('original_price'),
        cost=validated_data.get('cost'),
        sale_id=validated_data.get('sale_id') or None,
        sale_item_id=validated_data.get('sale_item_id') or None,
        reason=validated_data.get('reason') or None,
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def validate_discount(request):
    """Check a proposed discount against the signed-in employee's authority"""
    serializer = DiscountRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    discount_request, not_found = _build_request(request.user, serializer.validated_data)
    decision = not_found or DiscountValidationService.validate_discount(discount_request)
    data = DiscountDecisionSerializer(decision.to_dict()).data
    return success_response(data, decision.reason)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def apply_discount(request):
    """
    Commit a discount. A refusal is a normal answer: HTTP 200 with
    ``approved: false`` and, when a manager can override, an escalation id.
    """
    serializer = DiscountRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    discount_request, not_found = _build_request(request.user, serializer.validated_data)
    if not_found:
        return success_response({
            'approved': False,
            'requires_manager_approval': False,
            'reason': not_found.reason,
            'reason_code': not_found.reason_code,
        }, not_found.reason)

    result = DiscountService.apply_discount(discount_request)
    if result['approved']:
        return success_response(result, 'Discount applied', status_code=status.HTTP_201_CREATED)
    return success_response(result, result['reason'])


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_my_transactions(request):
    """Discounts the signed-in employee has sold, newest first"""
    transactions = DiscountTransaction.objects.select_related(
        'employee', 'approved_by'
    ).filter(employee=request.user)

    sale_id = request.GET.get('sale_id')
    if sale_id:
        transactions = transactions.filter(sale_id=sale_id)

    return paginated_response(transactions, DiscountTransactionSerializer, request)
