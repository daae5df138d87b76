"""
Staff rota and attendance.

Clocking in more than ``CLOCK_IN_GRACE`` after the scheduled start marks the
shift Late.
"""
import logging
from datetime import datetime, timedelta

from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import ConflictError
from .enums import AttendanceStatus, ShiftType
from .models import Shift

logger = logging.getLogger(__name__)

CLOCK_IN_GRACE = timedelta(minutes=5)
SHIFT_FIELDS = ("staff", "staff_name", "date", "shift_type", "start_time", "end_time", "notes")
ATTENDANCE_FIELDS = ("attendance_status", "actual_start_time", "actual_end_time")


def list_shifts(*, date=None, staff_id=None, exclude_day_off=False):
    qs = Shift.objects.all()
    if date:
        qs = qs.filter(date=date)
    if staff_id:
        qs = qs.filter(staff_id=staff_id)
    if exclude_day_off:
        qs = qs.exclude(shift_type=ShiftType.DAY_OFF)
    return qs.order_by("date", "start_time", "id")


def get_shift(pk):
    return Shift.objects.filter(pk=pk).first()


def _require(pk) -> Shift:
    shift = get_shift(pk)
    if shift is None:
        raise NotFound("Shift not found.")
    return shift


def _check_times(shift_type, start_time, end_time):
    if shift_type != ShiftType.DAY_OFF and (start_time is None or end_time is None):
        raise ValidationError({"start_time": ["Start and End time are required for Day, Night, and Custom shifts."]})


def create_shift(data: dict) -> Shift:
    _check_times(data["shift_type"], data.get("start_time"), data.get("end_time"))
    staff = data.get("staff")
    values = {k: data[k] for k in SHIFT_FIELDS if k in data}
    values["staff_name"] = data.get("staff_name") or (staff.display_name if staff else "")
    if not values["staff_name"]:
        raise ValidationError({"staff": ["Staff member is required."]})
    if data["shift_type"] == ShiftType.DAY_OFF:
        values.update(start_time=None, end_time=None)
    return Shift.objects.create(**values)


def update_shift(pk, data: dict) -> Shift:
    shift = _require(pk)
    changed = [k for k in SHIFT_FIELDS + ATTENDANCE_FIELDS if k in data]
    for key in changed:
        setattr(shift, key, data[key])
    if shift.shift_type == ShiftType.DAY_OFF:
        shift.start_time = shift.end_time = None
        changed += ["start_time", "end_time"]
    else:
        _check_times(shift.shift_type, shift.start_time, shift.end_time)
    if "staff" in changed and "staff_name" not in changed and shift.staff is not None:
        shift.staff_name = shift.staff.display_name
        changed.append("staff_name")
    if changed:
        shift.save(update_fields=sorted(set(changed)) + ["updated_at"])
    return shift


def record_attendance(pk, data: dict) -> Shift:
    """Merge the attendance fields into the shift; nothing else changes."""
    return update_shift(pk, {k: data[k] for k in ATTENDANCE_FIELDS if k in data})


def delete_shift(pk) -> None:
    deleted, _ = Shift.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("Shift not found.")


def todays_shift(staff_id):
    return list_shifts(date=timezone.localdate(), staff_id=staff_id, exclude_day_off=True).first()


def clock(shift: Shift, now=None) -> dict:
    """
    Attendance change for a clock button press.

    Scheduled -> Clocked In (or Late past the grace period);
    Clocked In / Late -> Clocked Out.
    """
    now = now or timezone.localtime()
    if shift.attendance_status == AttendanceStatus.SCHEDULED:
        status = AttendanceStatus.CLOCKED_IN
        if shift.start_time is not None:
            scheduled = datetime.combine(shift.date, shift.start_time, tzinfo=now.tzinfo)
            if now > scheduled + CLOCK_IN_GRACE:
                status = AttendanceStatus.LATE
        return {"attendance_status": status, "actual_start_time": now.time().replace(second=0, microsecond=0)}
    if shift.attendance_status in (AttendanceStatus.CLOCKED_IN, AttendanceStatus.LATE):
        return {"attendance_status": AttendanceStatus.CLOCKED_OUT, "actual_end_time": now.time().replace(second=0, microsecond=0)}
    raise ConflictError(f"Cannot clock in or out of a shift marked {shift.get_attendance_status_display()}.")
