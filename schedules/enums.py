from django.db import models

class ShiftType(models.TextChoices):
    DAY = "DAY", "Day"
    NIGHT = "NIGHT", "Night"
    DAY_OFF = "DAY_OFF", "Day Off"
    CUSTOM = "CUSTOM", "Custom"

class AttendanceStatus(models.TextChoices):
    SCHEDULED = "SCHEDULED", "Scheduled"
    CLOCKED_IN = "CLOCKED_IN", "Clocked In"
    LATE = "LATE", "Late"
    CLOCKED_OUT = "CLOCKED_OUT", "Clocked Out"
    ABSENT = "ABSENT", "Absent"
