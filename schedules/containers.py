from core.containers import EntityContainer

from . import services
from .models import Shift


class ShiftContainer(EntityContainer):
    model = Shift
    entity_type = "Shift"

    def load(self, **filters):
        return services.list_shifts(**filters)

    def create_entity(self, data):
        return services.create_shift(data)

    def update_entity(self, pk, data):
        return services.update_shift(pk, data)

    def delete_entity(self, pk):
        services.delete_shift(pk)

    def record_attendance(self, pk, data):
        return self.act(lambda key: services.record_attendance(key, data), pk, lambda shift: (
            f"Attendance for {shift.staff_name} on {shift.date:%Y-%m-%d}: {shift.get_attendance_status_display()}",
            "LogIn" if shift.attendance_status != "CLOCKED_OUT" else "LogOut"))

    def clock(self, pk):
        shift = services.get_shift(pk)
        data = services.clock(shift) if shift else {}
        return self.record_attendance(pk, data)

    def describe_created(self, entity):
        return f"Scheduled {entity.get_shift_type_display()} shift for {entity.staff_name} on {entity.date:%Y-%m-%d}", "CalendarClock"

    def describe_updated(self, entity, data):
        return f"Updated shift for {entity.staff_name} on {entity.date:%Y-%m-%d}", "Edit"

    def describe_removed(self, pk, entity):
        return f"Removed shift {pk}", "Trash2"

    def link_for(self, pk):
        return "/dashboard/staff-schedule"

    def matches(self, instance):
        f = self._filters
        return all((
            not f.get("date") or str(instance.date) == str(f["date"]),
            not f.get("staff_id") or str(instance.staff_id) == str(f["staff_id"]),
            not f.get("exclude_day_off") or instance.shift_type != "DAY_OFF",
        ))
