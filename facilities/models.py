from django.db import models
from django.utils import timezone

from .enums import BedStatus, AdmissionStatus


class Ward(models.Model):
    # names are unique case-insensitively; enforced in services.wards
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Bed(models.Model):
    ward = models.ForeignKey(Ward, related_name="beds", on_delete=models.CASCADE)
    label = models.CharField(max_length=50)
    status = models.CharField(max_length=16, choices=BedStatus.choices, default=BedStatus.AVAILABLE)

    # occupant, set while status is Occupied
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="beds")
    patient_name = models.CharField(max_length=255, blank=True)

    class Meta:
        unique_together = ("ward", "label")
        ordering = ["ward_id", "id"]

    def __str__(self):
        return f"{self.ward.name} - {self.label}"


class Admission(models.Model):
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="admissions")
    patient_name = models.CharField(max_length=255)
    ward = models.ForeignKey(Ward, null=True, blank=True, on_delete=models.SET_NULL, related_name="admissions")
    bed = models.ForeignKey(Bed, null=True, blank=True, on_delete=models.SET_NULL, related_name="admissions")
    # snapshot of where the patient lay, kept after the ward/bed is removed
    ward_name = models.CharField(max_length=100, blank=True)
    bed_label = models.CharField(max_length=50, blank=True)

    admission_date = models.DateTimeField(default=timezone.now)
    reason_for_admission = models.TextField()
    primary_doctor = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=20, choices=AdmissionStatus.choices, default=AdmissionStatus.ADMITTED)
    discharge_date = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-admission_date", "-id"]
        indexes = [
            models.Index(fields=["patient", "admission_date"], name="facilities__patient_a8d2c4_idx"),
            models.Index(fields=["status"], name="facilities__status_5f03be_idx"),
        ]

    def __str__(self):
        return f"{self.patient_name} -> {self.ward_name} / {self.bed_label} ({self.status})"
