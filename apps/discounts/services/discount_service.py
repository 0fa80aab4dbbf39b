"""
Apply/commit orchestration for discounts.

An allowed discount becomes a DiscountTransaction and a budget debit in one
database transaction; a denied one becomes an escalation or a plain refusal.
"""
import logging

from django.db import transaction

from apps.products.services import CatalogService
from ..models import DiscountEscalation, DiscountTransaction
from .budget_ledger import BudgetLedger
from .escalation_service import EscalationService
from .validation_service import DiscountRequest, DiscountValidationService

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('discounts.audit')


class DiscountService:
    """Turns allowed decisions into committed facts"""

    @staticmethod
    def apply_discount(request, approved_by=None, escalate=True):
        """
        Validate and commit a discount.

        The decision is re-checked inside the commit transaction against the
        locked budget row, so two terminals racing for the last of a budget
        cannot both succeed. Storage errors propagate after a full rollback.
        """
        decision = DiscountValidationService.validate_discount(request)
        if not decision.allowed:
            return DiscountService._refuse(request, decision, escalate)

        budget = None
        if not decision.tier.is_unrestricted:
            budget, _ = BudgetLedger.initialize_budget(request.employee, tier=decision.tier)

        with transaction.atomic():
            # Lock the same row that was initialised so a week rollover cannot detach the debit
            if budget is not None:
                budget = BudgetLedger.lock_budget(budget.pk)
                decision = DiscountValidationService.validate_discount(request, budget=budget)

            if decision.allowed:
                calculations = decision.calculations
                record = DiscountTransaction.objects.create(
                    sale_id=request.sale_id,
                    sale_item_id=request.sale_item_id,
                    employee=request.sold_by,
                    product=CatalogService.get_product(request.product_id),
                    original_price=calculations['original_price'],
                    product_cost=calculations['product_cost'],
                    discount_pct=request.discount_pct,
                    discount_amount=decision.discount_amount,
                    price_after_discount=calculations['price_after_discount'],
                    margin_before_pct=decision.margin_before,
                    margin_after_pct=decision.margin_after,
                    commission_impact=calculations['commission_impact'],
                    was_auto_approved=approved_by is None,
                    required_manager_approval=approved_by is not None,
                    approval_reason=request.reason,
                    approved_by=approved_by,
                    budget_period=budget,
                    tier_version=decision.tier.version,
                )
                if budget is not None:
                    budget = BudgetLedger.debit(request.employee, decision.discount_amount, budget=budget)

        if not decision.allowed:
            logger.info(
                "Discount for employee=%s lost budget race: %s", request.employee.pk, decision.escalation_reason
            )
            return DiscountService._refuse(request, decision, escalate)

        audit_logger.info(
            "discount_applied txn=%s employee=%s product=%s pct=%s amount=%s approved_by=%s",
            record.pk, request.sold_by.pk, request.product_id, request.discount_pct,
            record.discount_amount, getattr(approved_by, 'pk', None)
        )
        return {
            'approved': True,
            'transaction_id': record.pk,
            'escalation_id': None,
            'requires_manager_approval': False,
            'reason': decision.reason,
            'discount_amount': record.discount_amount,
            'price_after_discount': record.price_after_discount,
            'margin_before': decision.margin_before,
            'margin_after': decision.margin_after,
            'budget_remaining': budget.remaining_amount if budget is not None else None,
            'calculations': decision.calculations,
        }

    @staticmethod
    def _refuse(request, decision, escalate):
        result = {
            'approved': False,
            'transaction_id': None,
            'escalation_id': None,
            'requires_manager_approval': decision.escalation_required,
            'reason': decision.reason,
            'reason_code': decision.reason_code,
            'escalation_reason': decision.escalation_reason,
            'margin_before': decision.margin_before,
            'margin_after': decision.margin_after,
            'max_allowed_pct': decision.max_allowed_pct,
            'budget_remaining': decision.budget_remaining,
            'calculations': decision.calculations,
        }
        if escalate and decision.escalation_required:
            calculations = decision.calculations or {}
            escalation = EscalationService.create_escalation(
                employee=request.sold_by,
                discount_pct=request.discount_pct,
                product_id=request.product_id,
                reason=request.reason or decision.escalation_reason,
                margin_after=decision.margin_after,
                commission_impact=calculations.get('commission_impact'),
                original_price=request.original_price,
                product_cost=request.cost,
                denial_code=decision.reason_code,
            )
            result['escalation_id'] = escalation.pk
        return result

    @staticmethod
    def apply_approved_escalation(escalation_id, manager, sale_id=None, sale_item_id=None):
        """
        Apply the discount of an approved escalation under the manager's authority.

        The transaction is recorded for the requesting employee with
        ``approved_by`` set to the manager and draws on the manager's budget.
        Each escalation can be applied once; pending and denied ones never.
        """
        with transaction.atomic():
            escalation = DiscountEscalation.objects.select_for_update().filter(pk=escalation_id).first()
            if escalation is None:
                return DiscountService._escalation_refusal('Escalation not found')
            if not escalation.is_approved:
                return DiscountService._escalation_refusal(f"Escalation is {escalation.status}, not approved")
            if escalation.applied_transaction_id:
                return DiscountService._escalation_refusal('Escalation already applied')

            request, not_found = DiscountValidationService.build_request(
                employee=manager,
                discount_pct=escalation.requested_discount_pct,
                product_id=escalation.product_id,
                original_price=escalation.original_price,
                cost=escalation.product_cost,
                sold_by=escalation.requesting_employee,
                sale_id=sale_id,
                sale_item_id=sale_item_id,
                reason=escalation.review_notes or escalation.reason,
            )
            if not_found:
                return DiscountService._escalation_refusal(not_found.reason)

            result = DiscountService.apply_discount(request, approved_by=manager, escalate=False)
            if result['approved']:
                escalation.applied_transaction_id = result['transaction_id']
                escalation.save(update_fields=['applied_transaction', 'updated_at'])
                audit_logger.info(
                    "escalation_applied id=%s txn=%s manager=%s", escalation.pk, result['transaction_id'], manager.pk
                )

        result['escalation_id'] = escalation.pk
        return result

    @staticmethod
    def _escalation_refusal(reason):
        return {
            'approved': False,
            'transaction_id': None,
            'escalation_id': None,
            'requires_manager_approval': False,
            'reason': reason,
        }
