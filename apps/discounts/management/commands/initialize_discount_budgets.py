from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from apps.discounts.services import BudgetLedger, TierResolver

User = get_user_model()


class Command(BaseCommand):
    help = "Open this week's discount budget for every active employee with a restricted tier"

    def add_arguments(self, parser):
        parser.add_argument(
            '--role',
            action='append',
            dest='roles',
            help='Only initialize employees with this role (repeatable)',
        )

    def handle(self, *args, **options):
        employees = User.objects.filter(is_active=True).order_by('id')
        if options.get('roles'):
            employees = employees.filter(role__in=options['roles'])

        created_count = 0
        existing_count = 0
        skipped_count = 0

        for employee in employees:
            tier = TierResolver.get_tier_for_employee(employee)
            if tier is None or tier.is_unrestricted:
                skipped_count += 1
                continue

            budget, created = BudgetLedger.initialize_budget(employee, tier=tier)
            if created:
                created_count += 1
                self.stdout.write(
                    self.style.SUCCESS(f'Opened budget for {employee}: {budget.total_budget}')
                )
            else:
                existing_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f'Discount budgets: {created_count} created, {existing_count} already open, '
                f'{skipped_count} skipped'
            )
        )
