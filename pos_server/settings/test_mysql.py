"""
Test settings against a real MySQL server, for the row-locking tests.

    pytest --ds pos_server.settings.test_mysql
"""

from .test import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.mysql',
        'NAME': config('MYSQL_DATABASE', default='pos_server'),
        'USER': config('MYSQL_USERNAME', default='root'),
        'PASSWORD': config('MYSQL_PASSWORD', default=''),
        'HOST': config('MYSQL_HOST', default='localhost'),
        'PORT': config('MYSQL_PORT', default='3306'),
        'OPTIONS': {
            'charset': 'utf8mb4',
            'init_command': "SET sql_mode='STRICT_TRANS_TABLES'",
            'isolation_level': 'read committed',
        },
        'TEST': {
            'NAME': config('MYSQL_TEST_DATABASE', default='test_pos_server'),
            'CHARSET': 'utf8mb4',
        },
    }
}
