import logging

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import ConflictError
from facilities.enums import AdmissionStatus, BedStatus
from facilities.models import Admission, Bed

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("reason_for_admission", "primary_doctor", "status", "notes", "admission_date")


def list_admissions(*, patient_id=None, status=None, ward_id=None):
    qs = Admission.objects.select_related("ward", "bed")
    if patient_id:
        qs = qs.filter(patient_id=patient_id)
    if status:
        qs = qs.filter(status=status)
    if ward_id:
        qs = qs.filter(ward_id=ward_id)
    return qs.order_by("-admission_date", "-id")


def get_admission(pk):
    return Admission.objects.select_related("ward", "bed").filter(pk=pk).first()


def _require(pk) -> Admission:
    admission = get_admission(pk)
    if admission is None:
        raise NotFound("Admission not found.")
    return admission


def _take_bed(bed_pk, admission: Admission) -> Bed:
    bed = Bed.objects.select_for_update().select_related("ward").filter(pk=bed_pk).first()
    if bed is None:
        raise NotFound("Bed not found.")
    if bed.status != BedStatus.AVAILABLE:
        raise ConflictError(f'Bed "{bed.label}" in {bed.ward.name} is {bed.get_status_display().lower()}.')
    bed.status = BedStatus.OCCUPIED
    bed.patient = admission.patient
    bed.patient_name = admission.patient_name
    bed.save(update_fields=["status", "patient", "patient_name"])
    return bed


def _release_bed(bed: Bed):
    bed.status = BedStatus.NEEDS_CLEANING
    bed.patient = None
    bed.patient_name = ""
    bed.save(update_fields=["status", "patient", "patient_name"])


@transaction.atomic
def admit(data: dict) -> Admission:
    patient = data.get("patient")
    if patient is None:
        raise ValidationError({"patient": ["Patient is required."]})
    if Admission.objects.filter(patient=patient, status__in=AdmissionStatus.in_house()).exists():
        raise ConflictError(f"{patient.name} is already admitted.")

    admission = Admission(
        patient=patient,
        patient_name=data.get("patient_name") or patient.name,
        admission_date=data.get("admission_date") or timezone.now(),
        reason_for_admission=data["reason_for_admission"],
        primary_doctor=data.get("primary_doctor", ""),
        status=data.get("status") or AdmissionStatus.ADMITTED,
        notes=data.get("notes", ""),
    )
    bed = _take_bed(data["bed"].pk, admission)
    admission.bed = bed
    admission.ward = bed.ward
    admission.bed_label = bed.label
    admission.ward_name = bed.ward.name
    admission.save()
    logger.info("Admitted %s to %s / %s", admission.patient_name, admission.ward_name, admission.bed_label)
    return get_admission(admission.pk)


def update_admission(pk, data: dict) -> Admission:
    admission = _require(pk)
    new_status = data.get("status")
    if admission.status == AdmissionStatus.DISCHARGED and new_status not in (None, AdmissionStatus.DISCHARGED):
        raise ConflictError("A discharged admission cannot be reopened. Admit the patient again.")
    if new_status == AdmissionStatus.DISCHARGED and admission.status != AdmissionStatus.DISCHARGED:
        raise ConflictError("Use the discharge action to discharge a patient.")
    changed = [k for k in UPDATABLE_FIELDS if k in data]
    for key in changed:
        setattr(admission, key, data[key])
    if changed:
        admission.save(update_fields=changed + ["updated_at"])
    return get_admission(admission.pk)


@transaction.atomic
def discharge(pk, discharge_date=None) -> Admission:
    """Close the admission and hand the bed to housekeeping."""
    admission = _require(pk)
    if admission.status == AdmissionStatus.DISCHARGED:
        raise ConflictError("Admission is already discharged.")
    if admission.bed is not None:
        _release_bed(admission.bed)
    admission.status = AdmissionStatus.DISCHARGED
    admission.discharge_date = discharge_date or timezone.now()
    admission.save(update_fields=["status", "discharge_date", "updated_at"])
    return get_admission(admission.pk)


@transaction.atomic
def transfer(pk, bed_pk) -> Admission:
    admission = _require(pk)
    if admission.status == AdmissionStatus.DISCHARGED:
        raise ConflictError("Cannot transfer a discharged admission.")
    if admission.bed_id is not None and str(admission.bed_id) == str(bed_pk):
        raise ConflictError("Patient is already in that bed.")
    old_bed = admission.bed
    bed = _take_bed(bed_pk, admission)
    if old_bed is not None:
        _release_bed(old_bed)
    admission.bed = bed
    admission.ward = bed.ward
    admission.bed_label = bed.label
    admission.ward_name = bed.ward.name
    admission.save(update_fields=["bed", "ward", "bed_label", "ward_name", "updated_at"])
    logger.info("Transferred admission %s to %s / %s", admission.pk, admission.ward_name, admission.bed_label)
    return get_admission(admission.pk)
