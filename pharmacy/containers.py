from core.containers import EntityContainer

from .models import Medication, Prescription
from .services import inventory, prescriptions


class MedicationContainer(EntityContainer):
    model = Medication
    entity_type = "Medication"

    def load(self, **filters):
        return inventory.list_medications(**filters)

    def create_entity(self, data):
        return inventory.create_medication(data)

    def update_entity(self, pk, data):
        return inventory.update_medication(pk, data)

    def delete_entity(self, pk):
        inventory.delete_medication(pk)

    def adjust_stock(self, pk, delta):
        return self.act(
            lambda key: inventory.adjust_stock(key, delta), pk,
            lambda med: (f"Adjusted stock of {med.name} by {delta:+d} (now {med.stock})", "Package"),
        )

    def describe_created(self, entity):
        return f"Added medication {entity.name} to inventory", "Pill"

    def describe_updated(self, entity, data):
        return f"Updated medication {entity.name}. Stock: {entity.stock} ({entity.get_status_display()})", "Edit"

    def describe_removed(self, pk, entity):
        name = entity.name if entity else pk
        return f"Removed medication {name} from inventory", "Trash2"

    def link_for(self, pk):
        return f"/dashboard/pharmacy/inventory/{pk}"

    def matches(self, instance):
        status = self._filters.get("status")
        search = (self._filters.get("search") or "").lower()
        return (not status or instance.status == status) and search in instance.name.lower()


class PrescriptionContainer(EntityContainer):
    model = Prescription
    entity_type = "Prescription"

    def load(self, **filters):
        return prescriptions.list_prescriptions(**filters)

    def create_entity(self, data):
        return prescriptions.create_prescription(data)

    def update_entity(self, pk, data):
        return prescriptions.update_prescription(pk, data)

    def delete_entity(self, pk):
        prescriptions.delete_prescription(pk)

    def dispense(self, pk):
        return self.act(prescriptions.dispense, pk, lambda rx: (
            f"Dispensed {rx.quantity} x {rx.medication_name} to {rx.patient_name}", "Pill"))

    def refill(self, pk):
        return self.act(prescriptions.refill, pk, lambda rx: (
            f"Refilled prescription for {rx.medication_name} ({rx.patient_name}). Refills left: {rx.refills_remaining}",
            "RefreshCw"))

    def bill(self, pk):
        return self.act(prescriptions.bill, pk, lambda rx: (
            f"Billed prescription for {rx.medication_name} ({rx.patient_name})", "FileText"))

    def describe_created(self, entity):
        return f"Prescribed {entity.medication_name} for {entity.patient_name}", "Pill"

    def describe_updated(self, entity, data):
        return f"Updated prescription {entity.pk}. Status: {entity.get_status_display()}", "Edit"

    def describe_removed(self, pk, entity):
        return f"Deleted prescription {pk}", "Trash2"

    def link_for(self, pk):
        return f"/dashboard/pharmacy/prescriptions/{pk}/view"

    def matches(self, instance):
        patient_id = self._filters.get("patient_id")
        status = self._filters.get("status")
        return (not patient_id or str(instance.patient_id) == str(patient_id)) and (not status or instance.status == status)
