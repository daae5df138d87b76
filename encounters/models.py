from django.db import models
from django.utils import timezone

from .enums import ConsultationStatus

REASON_LENGTH = 50


class Consultation(models.Model):
    """
    A clinician's consultation note for one visit.
    """
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="consultations")
    patient_name = models.CharField(max_length=255)
    doctor_name = models.CharField(max_length=255)
    consultation_date = models.DateTimeField(default=timezone.now)

    # history
    presenting_complaint = models.TextField()
    history_of_presenting_complaint = models.TextField(blank=True)
    past_medical_history = models.TextField(blank=True)
    medication_history = models.TextField(blank=True)
    allergies = models.TextField(blank=True)
    family_history = models.TextField(blank=True)
    social_history = models.TextField(blank=True)
    review_of_systems = models.TextField(blank=True)

    # exam / assessment / plan
    examination_findings = models.TextField(blank=True)
    assessment_diagnosis = models.TextField()
    plan = models.TextField()

    status = models.CharField(max_length=24, choices=ConsultationStatus.choices, default=ConsultationStatus.OPEN)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-consultation_date", "-id"]
        indexes = [
            models.Index(fields=["patient", "consultation_date"], name="encounters__patient_0e4f7b_idx"),
        ]

    @property
    def reason(self) -> str:
        return (self.presenting_complaint or "")[:REASON_LENGTH]

    def __str__(self):
        return f"Consultation#{self.id} {self.patient_name} {self.consultation_date:%Y-%m-%d}"
