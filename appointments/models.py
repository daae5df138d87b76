from django.conf import settings
from django.db import models

from billing.enums import PaymentStatus
from .enums import ApptType, ApptStatus

class Appointment(models.Model):
    # patient/provider names are copied at booking time and kept in sync by signals
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="appointments")
    patient_name = models.CharField(max_length=255)
    provider = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="appointments_provided")  # doctor/nurse/etc.
    provider_name = models.CharField(max_length=255)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="appointments_created")

    date = models.DateField()
    time = models.TimeField()
    appt_type = models.CharField(max_length=16, choices=ApptType.choices, default=ApptType.CONSULTATION)
    status    = models.CharField(max_length=16, choices=ApptStatus.choices, default=ApptStatus.SCHEDULED)
    notes  = models.TextField(blank=True)

    # billing back-link
    invoice = models.ForeignKey("billing.Invoice", null=True, blank=True, on_delete=models.SET_NULL, related_name="appointments")
    payment_status = models.CharField(max_length=16, choices=PaymentStatus.choices, default=PaymentStatus.NOT_APPLICABLE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["provider","date","time"], name="appointment_provide_3f9b1c_idx"),
            models.Index(fields=["patient","date"], name="appointment_patient_7a2e40_idx"),
            models.Index(fields=["status"], name="appointment_status_c51d88_idx"),
        ]
        ordering = ["-date","-time","-id"]

    def __str__(self):
        return f"Appt#{self.id} {self.patient_name} {self.date:%Y-%m-%d} {self.time:%H:%M} ({self.appt_type})"
