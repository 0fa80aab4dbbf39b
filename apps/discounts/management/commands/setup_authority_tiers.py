from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand
from apps.discounts.models import AuthorityTier


class Command(BaseCommand):
    help = 'Set up the staff, manager and master discount authority tiers'

    def handle(self, *args, **options):
        """Create or update authority tiers"""
        threshold = settings.DISCOUNT_AUTHORITY['DEFAULT_HIGH_MARGIN_THRESHOLD_PCT']
        tiers = [
            {
                'role_name': 'staff',
                'display_name': 'Sales Staff',
                'max_discount_pct_standard': Decimal('10'),
                'max_discount_pct_high_margin': Decimal('15'),
                'high_margin_threshold_pct': threshold,
                'min_margin_floor_pct': Decimal('10'),
                'requires_approval_below_margin_pct': Decimal('15'),
                'is_unrestricted': False,
                'default_weekly_budget': Decimal('500.00'),
            },
            {
                'role_name': 'manager',
                'display_name': 'Store Manager',
                'max_discount_pct_standard': Decimal('20'),
                'max_discount_pct_high_margin': Decimal('30'),
                'high_margin_threshold_pct': threshold,
                'min_margin_floor_pct': Decimal('5'),
                'requires_approval_below_margin_pct': None,
                'is_unrestricted': False,
                'default_weekly_budget': Decimal('2000.00'),
            },
            {
                'role_name': 'master',
                'display_name': 'Owner',
                'max_discount_pct_standard': Decimal('100'),
                'max_discount_pct_high_margin': Decimal('100'),
                'high_margin_threshold_pct': threshold,
                'min_margin_floor_pct': Decimal('0'),
                'requires_approval_below_margin_pct': None,
                'is_unrestricted': True,
                'default_weekly_budget': None,
            },
        ]

        created_count = 0
        updated_count = 0

        for tier_data in tiers:
            tier, created = AuthorityTier.objects.get_or_create(
                role_name=tier_data['role_name'],
                defaults=tier_data
            )

            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f'Created tier: {tier.display_name}')
                )
                continue

            changed = False
            for key, value in tier_data.items():
                if getattr(tier, key) != value:
                    setattr(tier, key, value)
                    changed = True
            if changed:
                tier.version += 1
                tier.save()
                updated_count += 1
                self.stdout.write(
                    self.style.WARNING(f'Updated tier: {tier.display_name} (version {tier.version})')
                )

        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully set up authority tiers: {created_count} created, {updated_count} updated'
            )
        )
