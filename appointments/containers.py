from core.containers import EntityContainer

from .enums import ApptStatus
from .models import Appointment
from .services import booking


class AppointmentContainer(EntityContainer):
    model = Appointment
    entity_type = "Appointment"

    def load(self, **filters):
        return booking.list_appointments(**filters)

    def create_entity(self, data):
        return booking.create_appointment(data, created_by=self.actor)

    def update_entity(self, pk, data):
        return booking.update_appointment(pk, data)

    def delete_entity(self, pk):
        booking.delete_appointment(pk)

    def cancel(self, pk):
        return self.update(pk, {"status": ApptStatus.CANCELLED})

    def describe_created(self, entity):
        return (
            f"Booked {entity.get_appt_type_display()} for {entity.patient_name} with {entity.provider_name}",
            "CalendarPlus",
        )

    def describe_updated(self, entity, data):
        return f"Updated appointment {entity.pk}. Status: {entity.get_status_display()}", "Edit"

    def describe_removed(self, pk, entity):
        return f"Deleted appointment {pk}", "CalendarX"

    def link_for(self, pk):
        return f"/dashboard/appointments?appointment={pk}"

    def matches(self, instance):
        f = self._filters
        return all((
            not f.get("patient_id") or str(instance.patient_id) == str(f["patient_id"]),
            not f.get("provider_id") or str(instance.provider_id) == str(f["provider_id"]),
            not f.get("date") or str(instance.date) == str(f["date"]),
            not f.get("status") or instance.status == f["status"],
        ))
