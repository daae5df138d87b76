"""
Data access for invoices.

Line items are stored as JSON documents with money values kept as strings
("25.00") so they round-trip without float drift.
"""
import logging
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from core.exceptions import ConflictError
from core.models import next_document_number
from billing.enums import InvoiceStatus
from billing.models import Invoice

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
DELETABLE_STATUSES = {InvoiceStatus.DRAFT, InvoiceStatus.CANCELLED}
UPDATABLE_FIELDS = (
    "patient_name", "date", "due_date", "tax_rate", "tax_amount", "total_amount",
    "amount_paid", "status", "notes", "source",
)


def money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


def line_item_doc(item: dict) -> dict:
    quantity = int(item.get("quantity") or 1)
    unit_price = money(item.get("unit_price"))
    total = money(item["total"]) if item.get("total") not in (None, "") else money(unit_price * quantity)
    return {
        "description": item["description"],
        "quantity": quantity,
        "unit_price": str(unit_price),
        "total": str(total),
        "source_type": item.get("source_type") or "",
        "source_id": str(item.get("source_id") or ""),
    }


def _sub_total(items: list) -> Decimal:
    return money(sum((Decimal(i["total"]) for i in items), Decimal("0")))


def list_invoices(*, patient_id=None, status=None):
    qs = Invoice.objects.all()
    if patient_id:
        qs = qs.filter(patient_id=patient_id)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-date", "-id")


def get_invoice(pk):
    return Invoice.objects.filter(pk=pk).first()


@transaction.atomic
def create_invoice(data: dict) -> Invoice:
    items = [line_item_doc(i) for i in data.get("line_items") or []]
    if not items:
        raise ValidationError({"line_items": ["At least one line item is required."]})
    patient = data.get("patient")
    patient_name = data.get("patient_name") or (patient.name if patient else "")
    if not patient_name:
        raise ValidationError({"patient": ["Patient is required."]})

    today = timezone.localdate()
    sub_total = _sub_total(items)
    tax_rate = money(data.get("tax_rate"))
    tax_amount = money(data["tax_amount"]) if data.get("tax_amount") is not None else money(sub_total * tax_rate / 100)
    total = money(data["total_amount"]) if data.get("total_amount") is not None else sub_total + tax_amount
    if total < 0:
        raise ValidationError({"total_amount": ["Total amount cannot be negative."]})

    invoice = Invoice.objects.create(
        invoice_number=next_document_number("INV", str(today.year)),
        patient=patient,
        patient_name=patient_name,
        date=data.get("date") or today,
        due_date=data.get("due_date") or today + timedelta(days=settings.INVOICE_DUE_DAYS),
        line_items=items,
        sub_total=sub_total,
        tax_rate=tax_rate,
        tax_amount=tax_amount,
        total_amount=total,
        amount_paid=money(data.get("amount_paid")),
        status=data.get("status") or InvoiceStatus.PENDING_PAYMENT,
        notes=data.get("notes", ""),
        source=data.get("source", ""),
    )
    logger.info("Created invoice %s for %s", invoice.invoice_number, invoice.patient_name)
    return get_invoice(invoice.pk)


@transaction.atomic
def update_invoice(pk, data: dict) -> Invoice:
    invoice = get_invoice(pk)
    if invoice is None:
        raise NotFound("Invoice not found.")

    changed = []
    if "line_items" in data:
        items = [line_item_doc(i) for i in data["line_items"] or []]
        if not items:
            raise ValidationError({"line_items": ["At least one line item is required."]})
        invoice.line_items = items
        invoice.sub_total = _sub_total(items)
        changed += ["line_items", "sub_total"]
    for key in UPDATABLE_FIELDS:
        if key in data:
            setattr(invoice, key, data[key])
            changed.append(key)

    # Totals follow the items unless the caller sent them explicitly.
    if "line_items" in data or "tax_rate" in data:
        if "tax_amount" not in data:
            invoice.tax_amount = money(invoice.sub_total * money(invoice.tax_rate) / 100)
            changed.append("tax_amount")
        if "total_amount" not in data:
            invoice.total_amount = invoice.sub_total + money(invoice.tax_amount)
            changed.append("total_amount")

    if changed:
        invoice.save(update_fields=changed + ["updated_at"])
    return get_invoice(invoice.pk)


def delete_invoice(pk) -> None:
    invoice = get_invoice(pk)
    if invoice is None:
        raise NotFound("Invoice not found.")
    if invoice.status not in DELETABLE_STATUSES:
        raise ConflictError("Only draft or cancelled invoices can be deleted.")
    invoice.delete()
