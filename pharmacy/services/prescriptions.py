"""
Prescriptions: CRUD plus the dispensing workflow.

Dispensing draws the prescribed quantity from the inventory row with the same
medication name, when one exists. Billing raises an invoice priced from that
row.
"""
import logging

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from billing.enums import LineItemSource, PaymentStatus
from billing.services import invoices
from core.exceptions import ConflictError
from pharmacy.enums import RxStatus
from pharmacy.models import Medication, Prescription
from .inventory import find_medication

logger = logging.getLogger(__name__)

FIELDS = (
    "patient", "patient_name", "medication_name", "dosage", "quantity", "instructions",
    "prescribed_by", "date", "status", "is_billed", "payment_status", "refillable", "refills_remaining",
)


def list_prescriptions(*, patient_id=None, status=None):
    qs = Prescription.objects.all()
    if patient_id:
        qs = qs.filter(patient_id=patient_id)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-date", "-id")


def get_prescription(pk):
    return Prescription.objects.filter(pk=pk).first()


def _require(pk) -> Prescription:
    rx = get_prescription(pk)
    if rx is None:
        raise NotFound("Prescription not found.")
    return rx


def create_prescription(data: dict) -> Prescription:
    patient = data.get("patient")
    values = {k: data[k] for k in FIELDS if k in data}
    values["patient_name"] = data.get("patient_name") or (patient.name if patient else "")
    if not values["patient_name"]:
        raise ValidationError({"patient": ["Patient is required."]})
    if int(values.get("quantity") or 0) < 1:
        raise ValidationError({"quantity": ["Quantity must be at least 1."]})
    rx = Prescription.objects.create(**values)
    logger.info("Prescribed %s x%s for %s", rx.medication_name, rx.quantity, rx.patient_name)
    return rx


def update_prescription(pk, data: dict) -> Prescription:
    rx = _require(pk)
    changed = [k for k in FIELDS if k in data]
    for key in changed:
        setattr(rx, key, data[key])
    if "patient" in changed and "patient_name" not in changed and rx.patient is not None:
        rx.patient_name = rx.patient.name
        changed.append("patient_name")
    if changed:
        rx.save(update_fields=changed + ["updated_at"])
    return rx


def delete_prescription(pk) -> None:
    deleted, _ = Prescription.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("Prescription not found.")


@transaction.atomic
def dispense(pk) -> Prescription:
    rx = _require(pk)
    if rx.status in (RxStatus.DISPENSED, RxStatus.CANCELLED):
        raise ConflictError(f"Prescription is already {rx.get_status_display().lower()}.")

    med = find_medication(rx.medication_name)
    if med is not None:
        med = Medication.objects.select_for_update().get(pk=med.pk)
        if med.stock < rx.quantity:
            raise ConflictError(f"Only {med.stock} units of {med.name} in stock.")
        med.stock -= rx.quantity
        med.save(update_fields=["stock", "updated_at"])

    rx.status = RxStatus.DISPENSED
    rx.save(update_fields=["status", "updated_at"])
    return rx


def refill(pk) -> Prescription:
    rx = _require(pk)
    if not rx.refillable or rx.refills_remaining < 1:
        raise ConflictError("No refills remaining on this prescription.")
    rx.refills_remaining -= 1
    rx.status = RxStatus.PENDING
    rx.save(update_fields=["refills_remaining", "status", "updated_at"])
    return rx


@transaction.atomic
def bill(pk) -> Prescription:
    rx = _require(pk)
    if rx.is_billed:
        raise ConflictError("Prescription is already billed.")
    med = find_medication(rx.medication_name)
    invoice = invoices.create_invoice({
        "patient": rx.patient,
        "patient_name": rx.patient_name,
        "line_items": [{
            "description": f"{rx.medication_name} {rx.dosage}".strip(),
            "quantity": rx.quantity,
            "unit_price": med.price_per_unit if med else 0,
            "source_type": LineItemSource.PRESCRIPTION,
            "source_id": rx.pk,
        }],
        "source": "prescription",
    })
    rx.invoice = invoice
    rx.is_billed = True
    rx.payment_status = PaymentStatus.PENDING_PAYMENT
    rx.save(update_fields=["invoice", "is_billed", "payment_status", "updated_at"])
    logger.info("Prescription %s billed on invoice %s", rx.pk, invoice.invoice_number)
    return rx
