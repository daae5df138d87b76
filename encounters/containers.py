from rest_framework.exceptions import MethodNotAllowed

from core.containers import EntityContainer

from . import services
from .models import Consultation


class ConsultationContainer(EntityContainer):
    model = Consultation
    entity_type = "Consultation"

    def load(self, **filters):
        return services.list_consultations(**filters)

    def create_entity(self, data):
        return services.create_consultation(data, doctor=self.actor)

    def update_entity(self, pk, data):
        return services.update_consultation(pk, data)

    def remove(self, pk):
        raise MethodNotAllowed("DELETE", detail="Consultation notes are never deleted.")

    def describe_created(self, entity):
        return f"Recorded consultation for {entity.patient_name}: {entity.reason}", "Stethoscope"

    def describe_updated(self, entity, data):
        return f"Updated consultation for {entity.patient_name}. Status: {entity.get_status_display()}", "Edit"

    def link_for(self, pk):
        return f"/dashboard/consultations/{pk}"

    def matches(self, instance):
        patient_id = self._filters.get("patient_id")
        status = self._filters.get("status")
        return (not patient_id or str(instance.patient_id) == str(patient_id)) and (not status or instance.status == status)
