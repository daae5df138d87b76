from django.db import models

class BedStatus(models.TextChoices):
    AVAILABLE = "AVAILABLE", "Available"
    OCCUPIED = "OCCUPIED", "Occupied"
    NEEDS_CLEANING = "NEEDS_CLEANING", "Needs Cleaning"
    MAINTENANCE = "MAINTENANCE", "Maintenance"

class AdmissionStatus(models.TextChoices):
    ADMITTED = "ADMITTED", "Admitted"
    PENDING_DISCHARGE = "PENDING_DISCHARGE", "Pending Discharge"
    OBSERVATION = "OBSERVATION", "Observation"
    DISCHARGED = "DISCHARGED", "Discharged"

    @classmethod
    def in_house(cls):
        return {cls.ADMITTED, cls.PENDING_DISCHARGE, cls.OBSERVATION}
