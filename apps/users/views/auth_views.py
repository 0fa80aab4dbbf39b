"""
Employee authentication views.
"""
import logging

from django.contrib.auth import authenticate
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common.utils import success_response, error_response
from ..serializers import UserDetailSerializer, PasswordLoginSerializer

logger = logging.getLogger(__name__)


class PasswordLoginView(APIView):
    """Username/password login for point-of-sale terminals"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PasswordLoginSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid input', serializer.errors)

        user = authenticate(
            request,
            username=serializer.validated_data['username'],
            password=serializer.validated_data['password'],
        )
        if user is None or not user.is_active:
            logger.warning("Failed login for %s", serializer.validated_data['username'])
            return error_response('Invalid credentials', status_code=status.HTTP_401_UNAUTHORIZED)

        refresh = RefreshToken.for_user(user)
        refresh['role'] = user.role
        return success_response({
            'token': str(refresh.access_token),
            'refresh': str(refresh),
            'user': UserDetailSerializer(user).data
        }, 'Login successful')


class CurrentUserView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return success_response(UserDetailSerializer(request.user).data)
