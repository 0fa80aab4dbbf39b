"""
Custom exception handler for consistent API responses
"""
import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: 'Validation error',
    status.HTTP_401_UNAUTHORIZED: 'Authentication required',
    status.HTTP_403_FORBIDDEN: 'Permission denied',
    status.HTTP_404_NOT_FOUND: 'Resource not found',
    status.HTTP_405_METHOD_NOT_ALLOWED: 'Method not allowed',
}


def custom_exception_handler(exc, context):
    """
    Wrap DRF errors in the ``{'code', 'msg', 'errors'}`` envelope.

    Storage failures are not DRF exceptions; they are logged with the
    traceback and answered with a generic 500 so no partial state leaks.
    """
    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, DatabaseError):
            logger.exception("Storage failure while handling %s", context.get('view'))
            return Response({
                'code': status.HTTP_500_INTERNAL_SERVER_ERROR,
                'msg': 'Internal server error',
                'errors': {'detail': 'Storage unavailable, nothing was recorded'}
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return None

    if response.status_code >= 500:
        logger.error(f"API Exception: {exc}", exc_info=True)
    else:
        logger.warning(f"API Exception: {exc}")

    response.data = {
        'code': response.status_code,
        'msg': STATUS_MESSAGES.get(response.status_code, 'An error occurred'),
        'errors': response.data
    }
    if response.status_code >= 500:
        response.data['msg'] = 'Internal server error'
        request = context.get('request')
        if not request or not getattr(request.user, 'is_staff', False):
            response.data['errors'] = {'detail': 'Internal server error'}

    return response
