"""
Development settings for pos_server project.
"""

from decouple import config
from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=True, cast=bool)

DATABASES['default'].update({
    'NAME': config('MYSQL_DATABASE', default='pos_server_dev'),
    'CONN_MAX_AGE': config('DB_CONN_MAX_AGE', default=60, cast=int),
    'CONN_HEALTH_CHECKS': True,
})

CORS_ALLOW_ALL_ORIGINS = True

# Email backend for development
EMAIL_BACKEND = config('EMAIL_BACKEND', default='django.core.mail.backends.console.EmailBackend')

# Logging for development
LOGGING['handlers']['console']['level'] = config('LOG_LEVEL', default='DEBUG')
LOGGING['root']['level'] = config('LOG_LEVEL', default='DEBUG')
