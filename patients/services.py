"""
Data access for patient records.

Address, emergency contact and insurance are stored as whole sub-documents.
A partial update reads the current sub-document, merges the changed leaves
and writes the whole object back; untouched leaves keep their values.
"""
import logging

from django.db.models import Q
from django.utils import timezone
from rest_framework.exceptions import NotFound

from .enums import PatientStatus
from .models import Patient

logger = logging.getLogger(__name__)

NESTED_FIELDS = ("address", "emergency_contact", "insurance")
READ_ONLY_KEYS = ("id", "created_at", "updated_at")

# flat form field -> (sub-document, leaf)
FORM_FIELDS = {
    "address_line1": ("address", "line1"),
    "address_line2": ("address", "line2"),
    "city": ("address", "city"),
    "state": ("address", "state"),
    "postal_code": ("address", "postal_code"),
    "emergency_contact_name": ("emergency_contact", "name"),
    "emergency_contact_relationship": ("emergency_contact", "relationship"),
    "emergency_contact_number": ("emergency_contact", "number"),
    "insurance_provider": ("insurance", "provider"),
    "insurance_policy_number": ("insurance", "policy_number"),
}


def unflatten_form(data: dict) -> dict:
    """{"city": "Kampala"} -> {"address": {"city": "Kampala"}}"""
    out = {}
    for key, value in data.items():
        if key in FORM_FIELDS:
            doc, leaf = FORM_FIELDS[key]
            out.setdefault(doc, {})[leaf] = value
        else:
            out[key] = value
    return out


def merge_nested(current, changes: dict) -> dict:
    merged = dict(current or {})
    merged.update(changes)
    return merged


def clean_insurance(value):
    """Insurance is kept only while a provider or policy number is set."""
    if not value:
        return None
    provider = (value.get("provider") or "").strip()
    policy = (value.get("policy_number") or "").strip()
    if not provider and not policy:
        return None
    return {"provider": provider, "policy_number": policy}


def list_patients(*, search=None, status=None):
    qs = Patient.objects.all()
    if search:
        qs = qs.filter(
            Q(first_name__icontains=search) | Q(last_name__icontains=search) |
            Q(email__icontains=search) | Q(contact_number__icontains=search)
        )
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-created_at", "-id")


def get_patient(pk):
    return Patient.objects.filter(pk=pk).first()


def create_patient(data: dict) -> Patient:
    data = {k: v for k, v in unflatten_form(data).items() if k not in READ_ONLY_KEYS}
    data["insurance"] = clean_insurance(data.get("insurance"))
    data.setdefault("last_visit", timezone.localdate())
    data.setdefault("status", PatientStatus.ACTIVE)
    patient = Patient.objects.create(**data)
    logger.info("Registered patient %s", patient.pk)
    return get_patient(patient.pk)


def update_patient(pk, data: dict) -> Patient:
    patient = get_patient(pk)
    if patient is None:
        raise NotFound("Patient not found.")

    changed = []
    for key, value in unflatten_form(data).items():
        if key in READ_ONLY_KEYS:
            continue
        if key in NESTED_FIELDS and value is not None:
            value = merge_nested(getattr(patient, key), value)
        if key == "insurance":
            value = clean_insurance(value)
        setattr(patient, key, value)
        changed.append(key)

    if changed:
        patient.save(update_fields=changed + ["updated_at"])
    return get_patient(patient.pk)


def delete_patient(pk) -> None:
    deleted, _ = Patient.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("Patient not found.")
