from core.containers import EntityContainer

from . import services
from .models import Patient


class PatientContainer(EntityContainer):
    model = Patient
    entity_type = "Patient"

    def load(self, **filters):
        return services.list_patients(**filters)

    def create_entity(self, data):
        return services.create_patient(data)

    def update_entity(self, pk, data):
        return services.update_patient(pk, data)

    def delete_entity(self, pk):
        services.delete_patient(pk)

    def describe_created(self, entity):
        return f"Registered new patient: {entity.name}", "UserPlus"

    def describe_updated(self, entity, data):
        return f"Updated patient details: {entity.name}", "FileEdit"

    def describe_removed(self, pk, entity):
        return f"Deleted patient with ID: {pk}", "UserMinus"

    def link_for(self, pk):
        return f"/dashboard/patients/{pk}"

    def matches(self, instance):
        status = self._filters.get("status")
        return not status or instance.status == status
