"""
User views module.

All views are exported from this module to maintain backward compatibility.
"""
from .auth_views import PasswordLoginView, CurrentUserView

__all__ = [
    'PasswordLoginView',
    'CurrentUserView',
]
