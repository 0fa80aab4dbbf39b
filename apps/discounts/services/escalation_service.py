"""
Manager review of discounts the requesting employee could not grant.

pending -> approved | denied. Transitions are conditional updates on
``status = 'pending'`` so two managers acting at once resolve to one winner.
"""
import logging

from django.utils import timezone

from apps.products.services import CatalogService
from ..models import DiscountEscalation
from .margin_calculator import to_decimal

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('discounts.audit')


class EscalationService:

    @staticmethod
    def create_escalation(employee, discount_pct, product_id=None, reason=None, margin_after=None,
                          commission_impact=None, original_price=None, product_cost=None, denial_code=''):
        """Open a pending review case for a denied discount"""
        escalation = DiscountEscalation.objects.create(
            requesting_employee=employee,
            product=CatalogService.get_product(product_id),
            requested_discount_pct=to_decimal(discount_pct),
            original_price=original_price,
            product_cost=product_cost,
            margin_after_pct=margin_after,
            commission_impact=commission_impact,
            reason=(reason or '')[:255] or None,
            denial_code=denial_code or '',
        )
        audit_logger.info(
            "escalation_created id=%s employee=%s product=%s pct=%s code=%s",
            escalation.pk, employee.pk, product_id, escalation.requested_discount_pct, denial_code
        )
        return escalation

    @staticmethod
    def get_escalation(escalation_id):
        return DiscountEscalation.objects.select_related(
            'requesting_employee', 'product', 'reviewed_by'
        ).filter(pk=escalation_id).first()

    @staticmethod
    def get_pending_escalations():
        """Pending cases, oldest first"""
        return DiscountEscalation.objects.select_related(
            'requesting_employee', 'product'
        ).filter(status=DiscountEscalation.STATUS_PENDING).order_by('created_at', 'id')

    @staticmethod
    def approve_escalation(escalation_id, manager, notes=None):
        """
        Approve a pending escalation. Returns the updated escalation, or None
        when it does not exist or is no longer pending.

        Approval does not apply the discount; see
        DiscountService.apply_approved_escalation.
        """
        return EscalationService._review(escalation_id, manager, DiscountEscalation.STATUS_APPROVED, notes)

    @staticmethod
    def deny_escalation(escalation_id, manager, reason=None):
        return EscalationService._review(escalation_id, manager, DiscountEscalation.STATUS_DENIED, reason)

    @staticmethod
    def _review(escalation_id, manager, new_status, notes):
        now = timezone.now()
        updated = DiscountEscalation.objects.filter(
            pk=escalation_id,
            status=DiscountEscalation.STATUS_PENDING
        ).update(
            status=new_status,
            reviewed_by=manager,
            review_notes=notes or None,
            reviewed_at=now,
            updated_at=now
        )
        if not updated:
            logger.info("Escalation %s not found or not pending, %s ignored", escalation_id, new_status)
            return None

        audit_logger.info("escalation_%s id=%s manager=%s", new_status, escalation_id, manager.pk)
        return EscalationService.get_escalation(escalation_id)
