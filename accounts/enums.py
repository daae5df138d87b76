from django.db import models

class UserRole(models.TextChoices):
    ADMINISTRATOR  = "ADMINISTRATOR", "Administrator"
    DOCTOR         = "DOCTOR", "Doctor"
    NURSE          = "NURSE", "Nurse"
    RECEPTIONIST   = "RECEPTIONIST", "Receptionist"
    PHARMACIST     = "PHARMACIST", "Pharmacist"
    LAB_TECHNICIAN = "LAB_TECHNICIAN", "Lab Technician"

    @classmethod
    def clinical_roles(cls):
        return {cls.DOCTOR, cls.NURSE}

class UserStatus(models.TextChoices):
    ACTIVE   = "ACTIVE", "Active"
    INACTIVE = "INACTIVE", "Inactive"
    PENDING  = "PENDING", "Pending"
