from django.conf import settings
from django.db import models

from .enums import ShiftType, AttendanceStatus


class Shift(models.Model):
    staff = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="shifts")
    staff_name = models.CharField(max_length=255)
    date = models.DateField()
    shift_type = models.CharField(max_length=16, choices=ShiftType.choices)
    # required unless shift_type is Day Off
    start_time = models.TimeField(null=True, blank=True)
    end_time = models.TimeField(null=True, blank=True)
    notes = models.TextField(blank=True)

    attendance_status = models.CharField(max_length=16, choices=AttendanceStatus.choices, default=AttendanceStatus.SCHEDULED)
    actual_start_time = models.TimeField(null=True, blank=True)
    actual_end_time = models.TimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "start_time", "id"]
        indexes = [
            models.Index(fields=["staff", "date"], name="schedules_s_staff_i_d41a07_idx"),
            models.Index(fields=["date"], name="schedules_s_date_63b2e9_idx"),
        ]

    def __str__(self):
        return f"{self.staff_name} {self.date:%Y-%m-%d} {self.get_shift_type_display()}"
