import logging

from django.apps import apps
from django.db.models.signals import post_save
from django.dispatch import receiver

from .enums import InvoiceStatus, PaymentStatus
from .models import Invoice

logger = logging.getLogger(__name__)

INVOICE_TO_PAYMENT_STATUS = {
    InvoiceStatus.PAID: PaymentStatus.PAID,
    InvoiceStatus.PARTIALLY_PAID: PaymentStatus.PARTIALLY_PAID,
}

# models linked to an invoice that carry a payment_status copy
PAYMENT_LINKED = (
    "appointments.Appointment",
    "labs.LabOrder",
    "pharmacy.Prescription",
)


@receiver(post_save, sender=Invoice, dispatch_uid="billing.cascade_payment_status")
def cascade_payment_status(sender, instance, raw=False, **kwargs):
    """Once an invoice is (partially) paid, mirror that onto everything it bills."""
    payment_status = INVOICE_TO_PAYMENT_STATUS.get(instance.status)
    if raw or payment_status is None:
        return
    for label in PAYMENT_LINKED:
        model = apps.get_model(label)
        for row in model.objects.filter(invoice=instance).exclude(payment_status=payment_status):
            row.payment_status = payment_status
            row.save(update_fields=["payment_status"])
            logger.info("%s %s payment status -> %s", label, row.pk, payment_status)
