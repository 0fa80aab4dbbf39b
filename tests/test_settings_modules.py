"""
Tests for the alternative settings modules.
"""
import importlib

from pos_server.settings import test as sqlite_settings


def test_mysql_settings_keep_test_overrides():
    mysql_settings = importlib.import_module('pos_server.settings.test_mysql')
    database = mysql_settings.DATABASES['default']

    assert database['ENGINE'] == 'django.db.backends.mysql'
    assert database['OPTIONS']['isolation_level'] == 'read committed'
    assert database['TEST']['NAME']
    assert mysql_settings.PASSWORD_HASHERS == sqlite_settings.PASSWORD_HASHERS
    assert mysql_settings.MIGRATION_MODULES is sqlite_settings.MIGRATION_MODULES
