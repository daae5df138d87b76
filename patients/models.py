from datetime import date

from django.db import models

from .enums import Gender, PatientStatus

class Patient(models.Model):
    # core demographics
    first_name = models.CharField(max_length=120)
    last_name  = models.CharField(max_length=120)
    gender = models.CharField(max_length=32, choices=Gender.choices)
    date_of_birth = models.DateField()

    contact_number = models.CharField(max_length=32)
    email = models.EmailField(blank=True)

    # sub-documents; partial updates merge leaf fields (see patients.services)
    address = models.JSONField(default=dict, blank=True)             # {line1, line2, city, state, postal_code}
    emergency_contact = models.JSONField(default=dict, blank=True)   # {name, relationship, number}
    insurance = models.JSONField(null=True, blank=True)              # {provider, policy_number}

    # clinical profile bits
    allergies = models.JSONField(default=list, blank=True)           # ordered list of strings
    current_medications = models.JSONField(default=list, blank=True) # [{name, dosage, frequency}]
    medical_history_notes = models.TextField(blank=True)

    last_visit = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=16, choices=PatientStatus.choices, default=PatientStatus.ACTIVE)
    profile_picture_url = models.URLField(max_length=500, blank=True)

    # timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def age(self):
        if not self.date_of_birth:
            return None
        today = date.today()
        dob = self.date_of_birth
        return today.year - dob.year - ((today.month, today.day) < (dob.month, dob.day))

    def __str__(self):
        return self.name
