"""
Health check views for the point-of-sale server.
"""
import logging
import time

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

logger = logging.getLogger(__name__)


class BasicHealthCheckView(View):
    """
    Basic health check endpoint, no authentication required for monitoring
    tools. Verifies database connectivity and that authority tiers exist,
    since every discount decision depends on them.
    """

    def get(self, request):
        start_time = time.time()

        health_response = {
            'status': 'healthy',
            'timestamp': timezone.now().isoformat(),
            'version': '1.0.0'
        }

        db_status, db_error = self._check_database_health()
        health_response['database'] = db_status

        if db_status['status'] != 'healthy':
            health_response['status'] = 'unhealthy'
            logger.error(f"Database health check failed: {db_error}")
        else:
            health_response['authority_tiers'] = self._check_tiers()
            if health_response['authority_tiers']['count'] == 0:
                health_response['status'] = 'degraded'

        response_time_ms = (time.time() - start_time) * 1000
        health_response['response_time_ms'] = round(response_time_ms, 2)

        status_code = 503 if health_response['status'] == 'unhealthy' else 200
        return JsonResponse(health_response, status=status_code)

    def _check_database_health(self):
        """
        Returns:
            tuple: (db_status_dict, error_message)
        """
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                result = cursor.fetchone()
        except DatabaseError as e:
            return {
                'status': 'unhealthy',
                'message': 'Database connection failed',
                'error': 'Database connectivity error'
            }, str(e)

        if result and result[0] == 1:
            return {
                'status': 'healthy',
                'message': 'Database connection successful'
            }, None
        return {
            'status': 'unhealthy',
            'message': 'Database query returned unexpected result'
        }, 'Unexpected query result'

    def _check_tiers(self):
        from apps.discounts.models import AuthorityTier
        count = AuthorityTier.objects.count()
        return {
            'count': count,
            'message': 'ok' if count else 'No authority tiers configured; run setup_authority_tiers'
        }
