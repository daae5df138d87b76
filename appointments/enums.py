from django.db import models

class ApptType(models.TextChoices):
    CHECK_UP = "CHECK_UP", "Check-up"
    CONSULTATION = "CONSULTATION", "Consultation"
    FOLLOW_UP = "FOLLOW_UP", "Follow-up"
    PROCEDURE = "PROCEDURE", "Procedure"

class ApptStatus(models.TextChoices):
    SCHEDULED = "SCHEDULED","Scheduled"
    CONFIRMED = "CONFIRMED","Confirmed"
    CANCELLED = "CANCELLED","Cancelled"
    COMPLETED = "COMPLETED","Completed"
    ARRIVED = "ARRIVED","Arrived"

    @classmethod
    def slot_holding(cls):
        """Statuses that keep a provider's slot booked."""
        return {cls.SCHEDULED, cls.CONFIRMED, cls.ARRIVED}
