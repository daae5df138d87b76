"""
Appointment booking.

A provider can hold only one live appointment per date and time slot. The
provider is matched by id when the booking names one, otherwise by name, so
free-text providers still collide with each other.
"""
import logging

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from appointments.enums import ApptStatus, ApptType
from appointments.models import Appointment
from billing.enums import LineItemSource, PaymentStatus
from billing.services import invoices, pricing
from core.exceptions import ConflictError

logger = logging.getLogger(__name__)

# booking types billed automatically at the general fee
BILLABLE_TYPES = {
    ApptType.CONSULTATION: "consultation_fee",
    ApptType.CHECK_UP: "checkup_fee",
}
UPDATABLE_FIELDS = ("patient", "patient_name", "provider", "provider_name", "date", "time", "appt_type", "status", "notes")


def list_appointments(*, patient_id=None, provider_id=None, date=None, status=None):
    qs = Appointment.objects.select_related("patient", "provider", "invoice")
    if patient_id:
        qs = qs.filter(patient_id=patient_id)
    if provider_id:
        qs = qs.filter(provider_id=provider_id)
    if date:
        qs = qs.filter(date=date)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-date", "-time", "-id")


def get_appointment(pk):
    return Appointment.objects.select_related("patient", "provider", "invoice").filter(pk=pk).first()


def find_conflict(*, provider=None, provider_name="", date, time, exclude_pk=None):
    qs = Appointment.objects.filter(date=date, time=time, status__in=ApptStatus.slot_holding())
    if provider is not None:
        qs = qs.filter(provider=provider)
    else:
        qs = qs.filter(provider_name__iexact=(provider_name or "").strip())
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.first()


def _check_slot(provider, provider_name, date, time, exclude_pk=None):
    if find_conflict(provider=provider, provider_name=provider_name, date=date, time=time, exclude_pk=exclude_pk):
        raise ConflictError(f"{provider_name} is already booked for {date:%Y-%m-%d} at {time:%H:%M}")


def _bill(appt: Appointment):
    fee_field = BILLABLE_TYPES.get(appt.appt_type)
    if fee_field is None:
        return None
    fee = getattr(pricing.get_general_fees(), fee_field)
    return invoices.create_invoice({
        "patient": appt.patient,
        "patient_name": appt.patient_name,
        "date": appt.date,
        "line_items": [{
            "description": f"{appt.get_appt_type_display()} with {appt.provider_name}",
            "quantity": 1,
            "unit_price": fee,
            "source_type": LineItemSource.APPOINTMENT,
            "source_id": appt.pk,
        }],
        "source": "appointment",
    })


@transaction.atomic
def create_appointment(data: dict, *, created_by=None) -> Appointment:
    patient = data.get("patient")
    provider = data.get("provider")
    patient_name = data.get("patient_name") or (patient.name if patient else "")
    provider_name = data.get("provider_name") or (provider.display_name if provider else "")
    if not patient_name:
        raise ValidationError({"patient": ["Patient is required."]})
    if not provider_name:
        raise ValidationError({"provider_name": ["Provider is required."]})

    _check_slot(provider, provider_name, data["date"], data["time"])

    appt = Appointment.objects.create(
        patient=patient,
        patient_name=patient_name,
        provider=provider,
        provider_name=provider_name,
        created_by=created_by if getattr(created_by, "is_authenticated", False) else None,
        date=data["date"],
        time=data["time"],
        appt_type=data.get("appt_type") or ApptType.CONSULTATION,
        status=data.get("status") or ApptStatus.SCHEDULED,
        notes=data.get("notes", ""),
    )
    invoice = _bill(appt)
    if invoice is not None:
        appt.invoice = invoice
        appt.payment_status = PaymentStatus.PENDING_PAYMENT
        appt.save(update_fields=["invoice", "payment_status", "updated_at"])
        logger.info("Appointment %s billed on invoice %s", appt.pk, invoice.invoice_number)
    return get_appointment(appt.pk)


@transaction.atomic
def update_appointment(pk, data: dict) -> Appointment:
    appt = get_appointment(pk)
    if appt is None:
        raise NotFound("Appointment not found.")

    previous_status = appt.status
    changed = [key for key in UPDATABLE_FIELDS if key in data]
    for key in changed:
        setattr(appt, key, data[key])
    if "provider" in changed and "provider_name" not in changed and appt.provider is not None:
        appt.provider_name = appt.provider.display_name
        changed.append("provider_name")
    if "patient" in changed and "patient_name" not in changed and appt.patient is not None:
        appt.patient_name = appt.patient.name
        changed.append("patient_name")

    was_holding = previous_status in ApptStatus.slot_holding()
    rescheduled = {"date", "time", "provider", "provider_name"} & set(changed)
    reactivated = "status" in changed and not was_holding
    if (rescheduled or reactivated) and appt.status in ApptStatus.slot_holding():
        _check_slot(appt.provider, appt.provider_name, appt.date, appt.time, exclude_pk=appt.pk)

    if changed:
        appt.save(update_fields=changed + ["updated_at"])
    return get_appointment(appt.pk)


def delete_appointment(pk) -> None:
    deleted, _ = Appointment.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("Appointment not found.")
