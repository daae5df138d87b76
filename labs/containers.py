from core.containers import EntityContainer

from .models import LabOrder
from .services import orders


class LabOrderContainer(EntityContainer):
    model = LabOrder
    entity_type = "Lab Order"

    def load(self, **filters):
        return orders.list_lab_orders(**filters)

    def create_entity(self, data):
        return orders.create_lab_order(data, ordered_by=self.actor)

    def update_entity(self, pk, data):
        return orders.update_lab_order(pk, data)

    def delete_entity(self, pk):
        orders.delete_lab_order(pk)

    def enter_results(self, pk, tests):
        order = orders.get_lab_order(pk)
        actor_name = getattr(self.actor, "display_name", "")
        data = orders.results_update(order, tests, actor_name=actor_name) if order else {"tests": tests}
        return self.update(pk, data)

    def describe_created(self, entity):
        return f"Created lab order {entity.order_number} for {entity.patient_name}", "FlaskConical"

    def describe_updated(self, entity, data):
        return f"Updated lab order {entity.order_number}. Status: {entity.get_status_display()}", "Edit"

    def describe_removed(self, pk, entity):
        number = entity.order_number if entity else pk
        return f"Deleted lab order {number}", "Trash2"

    def link_for(self, pk):
        return f"/dashboard/lab?order={pk}"

    def matches(self, instance):
        patient_id = self._filters.get("patient_id")
        status = self._filters.get("status")
        return (not patient_id or str(instance.patient_id) == str(patient_id)) and (not status or instance.status == status)
