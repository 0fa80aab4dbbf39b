from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='AuthorityTier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role_name', models.CharField(max_length=30, unique=True)),
                ('display_name', models.CharField(blank=True, max_length=50)),
                ('max_discount_pct_standard', models.DecimalField(decimal_places=2, default=0, max_digits=5)),
                ('max_discount_pct_high_margin', models.DecimalField(decimal_places=2, default=0, max_digits=5)),
                ('high_margin_threshold_pct', models.DecimalField(decimal_places=2, default=30, help_text='Margin-before at or above which the high-margin ceiling applies', max_digits=5)),
                ('min_margin_floor_pct', models.DecimalField(decimal_places=2, default=0, help_text='Discounted price may never fall below cost marked up by this percent', max_digits=5)),
                ('requires_approval_below_margin_pct', models.DecimalField(blank=True, decimal_places=2, help_text='Post-discount margin below this needs a manager even inside the ceiling', max_digits=5, null=True)),
                ('is_unrestricted', models.BooleanField(default=False)),
                ('default_weekly_budget', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('version', models.PositiveIntegerField(default=1)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'discount_authority_tiers',
                'ordering': ['role_name'],
            },
        ),
        migrations.CreateModel(
            name='DiscountBudget',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('period_start', models.DateField()),
                ('period_end', models.DateField()),
                ('total_budget', models.DecimalField(decimal_places=2, max_digits=10)),
                ('used_amount', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='discount_budgets', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'discount_budgets',
                'ordering': ['-period_start'],
                'constraints': [models.UniqueConstraint(fields=('employee', 'period_start'), name='uniq_budget_employee_period')],
            },
        ),
        migrations.CreateModel(
            name='DiscountTransaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sale_id', models.CharField(blank=True, db_index=True, max_length=64, null=True)),
                ('sale_item_id', models.CharField(blank=True, max_length=64, null=True)),
                ('original_price', models.DecimalField(decimal_places=2, max_digits=10)),
                ('product_cost', models.DecimalField(decimal_places=2, max_digits=10)),
                ('discount_pct', models.DecimalField(decimal_places=2, max_digits=5)),
                ('discount_amount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('price_after_discount', models.DecimalField(decimal_places=2, max_digits=10)),
                ('margin_before_pct', models.DecimalField(decimal_places=1, max_digits=16)),
                ('margin_after_pct', models.DecimalField(decimal_places=1, max_digits=16)),
                ('commission_impact', models.DecimalField(decimal_places=2, max_digits=10)),
                ('was_auto_approved', models.BooleanField(default=True)),
                ('required_manager_approval', models.BooleanField(default=False)),
                ('approval_reason', models.CharField(blank=True, max_length=255, null=True)),
                ('tier_version', models.PositiveIntegerField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='approved_discount_transactions', to=settings.AUTH_USER_MODEL)),
                ('budget_period', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='transactions', to='discounts.discountbudget')),
                ('employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='discount_transactions', to=settings.AUTH_USER_MODEL)),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='discount_transactions', to='products.product')),
            ],
            options={
                'db_table': 'discount_transactions',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['employee', 'created_at'], name='discount_tr_employe_6a1d2b_idx')],
            },
        ),
        migrations.CreateModel(
            name='DiscountEscalation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('requested_discount_pct', models.DecimalField(decimal_places=2, max_digits=5)),
                ('original_price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('product_cost', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('margin_after_pct', models.DecimalField(blank=True, decimal_places=1, max_digits=16, null=True)),
                ('commission_impact', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('reason', models.CharField(blank=True, max_length=255, null=True)),
                ('denial_code', models.CharField(blank=True, default='', max_length=30)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('denied', 'Denied')], db_index=True, default='pending', max_length=10)),
                ('review_notes', models.TextField(blank=True, null=True)),
                ('reviewed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('applied_transaction', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='escalation', to='discounts.discounttransaction')),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='discount_escalations', to='products.product')),
                ('requesting_employee', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='discount_escalations', to=settings.AUTH_USER_MODEL)),
                ('reviewed_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name='reviewed_discount_escalations', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'discount_escalations',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['status', 'created_at'], name='discount_es_status_3c9f0e_idx')],
            },
        ),
    ]
