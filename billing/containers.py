from core.containers import EntityContainer
from system_admin.services import get_setting

from .models import Invoice
from .services import invoices


def _currency(value) -> str:
    return f"{get_setting('currency')} {value}"


class InvoiceContainer(EntityContainer):
    model = Invoice
    entity_type = "Invoice"

    def load(self, **filters):
        return invoices.list_invoices(**filters)

    def create_entity(self, data):
        return invoices.create_invoice(data)

    def update_entity(self, pk, data):
        return invoices.update_invoice(pk, data)

    def delete_entity(self, pk):
        invoices.delete_invoice(pk)

    def describe_created(self, entity):
        return (
            f"Created Invoice {entity.invoice_number} for {entity.patient_name}, "
            f"Amount: {_currency(entity.total_amount)}",
            "FileText",
        )

    def describe_updated(self, entity, data):
        text = f"Updated Invoice {entity.invoice_number} for {entity.patient_name}. New Status: {entity.get_status_display()}."
        if "amount_paid" in data:
            text += f" Payment updated to {_currency(entity.amount_paid)}."
        return text, "Edit"

    def describe_removed(self, pk, entity):
        number = entity.invoice_number if entity else pk
        return f"Deleted Invoice {number}", "Trash2"

    def link_for(self, pk):
        return f"/dashboard/billing?invoice={pk}"

    def matches(self, instance):
        patient_id = self._filters.get("patient_id")
        status = self._filters.get("status")
        return (not patient_id or str(instance.patient_id) == str(patient_id)) and (not status or instance.status == status)
