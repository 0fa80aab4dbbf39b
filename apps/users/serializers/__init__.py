"""
User serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .user_serializers import UserDetailSerializer, PasswordLoginSerializer

__all__ = [
    'UserDetailSerializer',
    'PasswordLoginSerializer',
]
