"""
Authority tier administration views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from ..permissions import IsTierAdministrator
from ..serializers import AuthorityTierSerializer, AuthorityTierUpdateSerializer
from ..services import TierResolver


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_tiers(request):
    return success_response(AuthorityTierSerializer(TierResolver.list_tiers(), many=True).data)


@api_view(['PATCH'])
@permission_classes([IsTierAdministrator])
def update_tier(request, role):
    serializer = AuthorityTierUpdateSerializer(data=request.data, partial=True)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    tier = TierResolver.update_tier(role, serializer.validated_data, updated_by=request.user)
    if tier is None:
        return error_response('Tier not found', status_code=status.HTTP_404_NOT_FOUND)
    return success_response(AuthorityTierSerializer(tier).data, 'Tier updated')
