import logging

from rest_framework.exceptions import NotFound, ValidationError

from .models import Consultation

logger = logging.getLogger(__name__)

NOTE_FIELDS = (
    "doctor_name", "consultation_date", "presenting_complaint",
    "history_of_presenting_complaint", "past_medical_history", "medication_history",
    "allergies", "family_history", "social_history", "review_of_systems",
    "examination_findings", "assessment_diagnosis", "plan", "status",
)


def list_consultations(*, patient_id=None, status=None):
    qs = Consultation.objects.all()
    if patient_id:
        qs = qs.filter(patient_id=patient_id)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-consultation_date", "-id")


def get_consultation(pk):
    return Consultation.objects.filter(pk=pk).first()


def create_consultation(data: dict, *, doctor=None) -> Consultation:
    patient = data.get("patient")
    if patient is None:
        raise ValidationError({"patient": ["Patient is required."]})
    values = {k: data[k] for k in NOTE_FIELDS if k in data}
    values["doctor_name"] = values.get("doctor_name") or getattr(doctor, "display_name", "")
    if not values["doctor_name"]:
        raise ValidationError({"doctor_name": ["Doctor is required."]})
    consultation = Consultation.objects.create(
        patient=patient,
        patient_name=data.get("patient_name") or patient.name,
        **values,
    )
    logger.info("Consultation %s recorded for %s by %s", consultation.pk, consultation.patient_name, consultation.doctor_name)
    return consultation


def update_consultation(pk, data: dict) -> Consultation:
    consultation = get_consultation(pk)
    if consultation is None:
        raise NotFound("Consultation not found.")
    changed = [k for k in NOTE_FIELDS if k in data]
    for key in changed:
        setattr(consultation, key, data[key])
    if changed:
        consultation.save(update_fields=changed + ["updated_at"])
    return consultation
