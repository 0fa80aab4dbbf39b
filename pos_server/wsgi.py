"""
WSGI config for pos_server project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'pos_server.settings.production')

application = get_wsgi_application()
