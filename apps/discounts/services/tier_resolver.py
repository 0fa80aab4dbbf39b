"""
Maps employee roles onto authority tiers and administers tier policy.
"""
import logging

from django.conf import settings
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from ..models import AuthorityTier

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('discounts.audit')


class TierResolver:
    """Tier lookups hit the table on every call; administrators may change ceilings at any time."""

    @staticmethod
    def normalize_role(role):
        normalized = (role or '').strip().lower()
        aliases = settings.DISCOUNT_AUTHORITY.get('ROLE_ALIASES', {})
        return aliases.get(normalized, normalized)

    @staticmethod
    def get_tier(role):
        """Return the AuthorityTier for a role label, or None when no tier is configured"""
        role_name = TierResolver.normalize_role(role)
        if not role_name:
            return None
        return AuthorityTier.objects.filter(role_name=role_name).first()

    @staticmethod
    def get_tier_for_employee(employee):
        return TierResolver.get_tier(getattr(employee, 'role', None))

    @staticmethod
    def list_tiers():
        return AuthorityTier.objects.all()

    @staticmethod
    def update_tier(role, updates, updated_by=None):
        """
        Change the policy columns of a tier and bump its version.

        Keys outside ``AuthorityTier.POLICY_FIELDS`` are ignored. Returns the
        updated tier, or None when the role has no tier or nothing applicable
        was supplied.
        """
        changes = {key: value for key, value in updates.items() if key in AuthorityTier.POLICY_FIELDS}
        if not changes:
            return None

        role_name = TierResolver.normalize_role(role)
        with transaction.atomic():
            updated = AuthorityTier.objects.filter(role_name=role_name).update(
                version=F('version') + 1,
                updated_at=timezone.now(),
                **changes
            )
            if not updated:
                logger.info("Tier update skipped, no tier for role %s", role_name)
                return None
            tier = AuthorityTier.objects.get(role_name=role_name)

        audit_logger.info(
            "tier_updated role=%s version=%s by=%s changes=%s",
            role_name, tier.version, getattr(updated_by, 'pk', None), sorted(changes)
        )
        return tier
