"""
API tests for the discount authority endpoints.
"""
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.discounts.models import DiscountEscalation
from apps.discounts.services import BudgetLedger, EscalationService
from tests.factories import ProductFactory, UserFactory


@pytest.mark.django_db
class TestValidateEndpoint:

    def test_requires_authentication(self, api_client):
        response = api_client.post(reverse('discounts:validate'), {'discount_pct': '5'}, format='json')
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['code'] == 401

    def test_denial_comes_back_as_data(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).post(reverse('discounts:validate'), {
            'discount_pct': '15',
            'original_price': '500.00',
            'cost': '400.00',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['msg'] == 'Exceeds tier limit'
        data = response.data['data']
        assert data['allowed'] is False
        assert data['reason_code'] == 'exceeds_tier_limit'
        assert data['max_allowed_pct'] == '10.00'
        assert data['escalation_required'] is True
        assert data['calculations']['price_after_discount'] == Decimal('425.00')

    def test_validate_by_product(self, client_for, staff_tier, staff_user):
        product = ProductFactory()
        response = client_for(staff_user).post(reverse('discounts:validate'), {
            'product_id': product.id,
            'discount_pct': '20',
        }, format='json')

        assert response.data['data']['allowed'] is True
        assert response.data['data']['margin_after'] == '30.0'

    def test_unknown_product(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).post(reverse('discounts:validate'), {
            'product_id': 999999,
            'discount_pct': '5',
        }, format='json')

        assert response.data['data']['reason_code'] == 'product_not_found'
        assert response.data['data']['escalation_required'] is False

    def test_extreme_margin_is_reported(self, client_for, master_tier, master_user):
        response = client_for(master_user).post(reverse('discounts:validate'), {
            'discount_pct': '5',
            'original_price': '0.01',
            'cost': '99999999.99',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['allowed'] is True
        assert Decimal(response.data['data']['margin_after']) < Decimal('-999999999000')

    @pytest.mark.parametrize('payload', [
        {'discount_pct': '5'},
        {'discount_pct': '5', 'original_price': '100.00'},
        {'discount_pct': '101', 'original_price': '100.00', 'cost': '50.00'},
        {'discount_pct': '-1', 'original_price': '100.00', 'cost': '50.00'},
        {'discount_pct': '5', 'original_price': '0.00', 'cost': '50.00'},
    ])
    def test_invalid_input(self, client_for, staff_tier, staff_user, payload):
        response = client_for(staff_user).post(reverse('discounts:validate'), payload, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'errors' in response.data


@pytest.mark.django_db
class TestApplyEndpoint:

    def test_apply_commits_discount(self, client_for, staff_tier, staff_user):
        product = ProductFactory()
        response = client_for(staff_user).post(reverse('discounts:apply'), {
            'product_id': product.id,
            'discount_pct': '10',
            'sale_id': 'S-9',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['approved'] is True
        assert response.data['data']['transaction_id']
        assert BudgetLedger.get_current_budget(staff_user).used_amount == Decimal('50.00')

    def test_refusal_returns_escalation(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).post(reverse('discounts:apply'), {
            'discount_pct': '15',
            'original_price': '500.00',
            'cost': '400.00',
        }, format='json')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['approved'] is False
        assert data['requires_manager_approval'] is True
        assert DiscountEscalation.objects.filter(pk=data['escalation_id']).exists()

    def test_unknown_product_is_not_escalated(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).post(reverse('discounts:apply'), {
            'product_id': 999999,
            'discount_pct': '5',
        }, format='json')

        assert response.data['data']['approved'] is False
        assert response.data['data']['reason'] == 'Product not found'
        assert not DiscountEscalation.objects.exists()

    def test_transactions_listing(self, client_for, staff_tier, staff_user):
        client = client_for(staff_user)
        client.post(reverse('discounts:apply'), {
            'discount_pct': '5', 'original_price': '500.00', 'cost': '250.00', 'sale_id': 'S-1'
        }, format='json')

        response = client.get(reverse('discounts:transactions'), {'sale_id': 'S-1'})

        assert response.data['data']['page']['total'] == 1
        assert response.data['data']['list'][0]['discount_amount'] == '25.00'


@pytest.mark.django_db
class TestBudgetEndpoints:

    def test_uninitialized_budget_shows_default(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).get(reverse('discounts:budget'))

        assert response.data['data']['initialized'] is False
        assert response.data['data']['remaining_amount'] == Decimal('500.00')
        assert response.data['data']['no_tier'] is False

    def test_employee_without_tier_has_no_allowance(self, client_for, staff_tier):
        employee = UserFactory(role='cashier')
        response = client_for(employee).get(reverse('discounts:budget'))

        assert response.data['data']['initialized'] is False
        assert response.data['data']['no_tier'] is True
        assert response.data['data']['remaining_amount'] is None


    def test_staff_cannot_initialize_budgets(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).post(
            reverse('discounts:initialize_budget'), {'employee_id': staff_user.id}, format='json'
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_initializes_budget_once(self, client_for, staff_tier, staff_user, manager_user):
        client = client_for(manager_user)
        url = reverse('discounts:initialize_budget')

        first = client.post(url, {'employee_id': staff_user.id, 'total_budget': '250.00'}, format='json')
        second = client.post(url, {'employee_id': staff_user.id, 'total_budget': '900.00'}, format='json')

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_200_OK
        assert second.data['data']['created'] is False
        assert second.data['data']['total_budget'] == '250.00'

        client.force_authenticate(user=staff_user)
        current = client.get(reverse('discounts:budget'))
        assert current.data['data']['initialized'] is True
        assert current.data['data']['remaining_amount'] == '250.00'

    def test_initialize_unknown_employee(self, client_for, manager_user):
        response = client_for(manager_user).post(
            reverse('discounts:initialize_budget'), {'employee_id': 424242}, format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestEscalationEndpoints:

    def _escalation(self, employee):
        return EscalationService.create_escalation(
            employee, Decimal('30'), original_price=Decimal('500'), product_cost=Decimal('250'),
            denial_code='exceeds_tier_limit'
        )

    def test_employee_opens_escalation(self, client_for, staff_tier, staff_user):
        response = client_for(staff_user).post(reverse('discounts:create_escalation'), {
            'discount_pct': '30',
            'original_price': '500.00',
            'cost': '250.00',
            'reason': 'Matching a flyer price',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['status'] == 'pending'
        assert response.data['data']['denial_code'] == 'exceeds_tier_limit'
        assert response.data['data']['reason'] == 'Matching a flyer price'

    def test_staff_cannot_review(self, client_for, staff_user):
        escalation = self._escalation(staff_user)
        response = client_for(staff_user).post(
            reverse('discounts:approve_escalation', args=[escalation.id]), {}, format='json'
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_approves_once(self, client_for, staff_user, manager_user):
        escalation = self._escalation(staff_user)
        client = client_for(manager_user)
        url = reverse('discounts:approve_escalation', args=[escalation.id])

        first = client.post(url, {'notes': 'ok'}, format='json')
        second = client.post(url, {'notes': 'again'}, format='json')

        assert first.status_code == status.HTTP_200_OK
        assert first.data['data']['status'] == 'approved'
        assert first.data['data']['reviewed_by'] == manager_user.id
        assert second.status_code == status.HTTP_409_CONFLICT

    def test_manager_denies(self, client_for, staff_user, manager_user):
        escalation = self._escalation(staff_user)
        response = client_for(manager_user).post(
            reverse('discounts:deny_escalation', args=[escalation.id]), {'notes': 'Below cost'}, format='json'
        )
        assert response.data['data']['status'] == 'denied'
        assert response.data['data']['review_notes'] == 'Below cost'

    def test_pending_list(self, client_for, staff_user, manager_user):
        self._escalation(staff_user)
        self._escalation(staff_user)

        response = client_for(manager_user).get(reverse('discounts:pending_escalations'))

        assert len(response.data['data']) == 2

    def test_detail_visible_to_requester_and_managers_only(self, client_for, staff_user, manager_user):
        escalation = self._escalation(staff_user)
        url = reverse('discounts:escalation_detail', args=[escalation.id])

        assert client_for(staff_user).get(url).status_code == status.HTTP_200_OK
        assert client_for(manager_user).get(url).status_code == status.HTTP_200_OK
        assert client_for(UserFactory(role='staff')).get(url).status_code == status.HTTP_403_FORBIDDEN

    def test_apply_approved_escalation(self, client_for, manager_tier, staff_user, manager_user):
        escalation = self._escalation(staff_user)
        EscalationService.approve_escalation(escalation.id, manager_user)
        client = client_for(manager_user)
        url = reverse('discounts:apply_escalation', args=[escalation.id])

        first = client.post(url, {'sale_id': 'S-5'}, format='json')
        second = client.post(url, {'sale_id': 'S-5'}, format='json')

        assert first.status_code == status.HTTP_201_CREATED
        assert first.data['data']['approved'] is True
        assert second.status_code == status.HTTP_409_CONFLICT
        assert second.data['msg'] == 'Escalation already applied'


@pytest.mark.django_db
class TestTierEndpoints:

    def test_list_tiers(self, client_for, tiers, staff_user):
        response = client_for(staff_user).get(reverse('discounts:tiers'))
        assert [t['role_name'] for t in response.data['data']] == ['manager', 'master', 'staff']

    def test_manager_cannot_change_tiers(self, client_for, staff_tier, manager_user):
        response = client_for(manager_user).patch(
            reverse('discounts:update_tier', args=['staff']), {'max_discount_pct_standard': '12'}, format='json'
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_master_updates_tier(self, client_for, staff_tier, master_user):
        response = client_for(master_user).patch(
            reverse('discounts:update_tier', args=['staff']), {'max_discount_pct_standard': '12'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['max_discount_pct_standard'] == '12.00'
        assert response.data['data']['version'] == 2

    def test_empty_update_rejected(self, client_for, staff_tier, master_user):
        response = client_for(master_user).patch(
            reverse('discounts:update_tier', args=['staff']), {}, format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_role(self, client_for, master_user):
        response = client_for(master_user).patch(
            reverse('discounts:update_tier', args=['cashier']), {'is_unrestricted': True}, format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND
