"""
Lab order data access.

Orders are numbered LAB{YYYY}-{MM}-{NNNNN} with a counter per month. Each
test keeps its own status; entering results moves the whole order along.
"""
import logging
import uuid

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from billing.enums import LineItemSource, PaymentStatus
from billing.services import invoices, pricing
from core.models import next_document_number
from labs.enums import LabStatus
from labs.models import LabOrder

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "patient_name", "ordering_doctor", "status", "clinical_notes",
    "sample_collection_date", "sample_collector", "verification_date", "verified_by",
    "payment_status",
)
TEST_KEYS = ("name", "status", "result", "reference_range", "unit", "notes")


def test_doc(test: dict) -> dict:
    """Normalise one test; a missing price comes from the lab test price list."""
    name = (test.get("name") or "").strip()
    price = test.get("price")
    if price in (None, ""):
        price = pricing.lab_test_price(name)
    doc = {key: test.get(key) or "" for key in TEST_KEYS}
    doc.update({
        "id": str(test.get("id") or uuid.uuid4().hex[:12]),
        "name": name,
        "price": str(invoices.money(price)),
        "status": test.get("status") or LabStatus.PENDING_SAMPLE,
    })
    return doc


def list_lab_orders(*, patient_id=None, status=None):
    qs = LabOrder.objects.all()
    if patient_id:
        qs = qs.filter(patient_id=patient_id)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-order_date", "-id")


def get_lab_order(pk):
    return LabOrder.objects.filter(pk=pk).first()


def _bill(order: LabOrder):
    items = [
        {
            "description": f"Lab test: {t['name']}",
            "quantity": 1,
            "unit_price": t["price"],
            "source_type": LineItemSource.LAB_ORDER,
            "source_id": order.pk,
        }
        for t in order.tests
    ]
    return invoices.create_invoice({
        "patient": order.patient,
        "patient_name": order.patient_name,
        "line_items": items,
        "source": "lab_order",
    })


@transaction.atomic
def create_lab_order(data: dict, *, ordered_by=None, bill=True) -> LabOrder:
    patient = data.get("patient")
    if patient is None:
        raise ValidationError({"patient": ["Patient is required."]})
    tests = [test_doc(t) for t in data.get("tests") or []]
    if not tests:
        raise ValidationError({"tests": ["At least one test is required."]})

    now = timezone.now()
    order = LabOrder.objects.create(
        order_number=next_document_number("LAB", now.strftime("%Y-%m")),
        patient=patient,
        patient_name=data.get("patient_name") or patient.name,
        ordering_doctor=data.get("ordering_doctor") or getattr(ordered_by, "display_name", ""),
        ordered_by=ordered_by if getattr(ordered_by, "is_authenticated", False) else None,
        order_date=data.get("order_date") or now,
        tests=tests,
        status=data.get("status") or LabStatus.PENDING_SAMPLE,
        clinical_notes=data.get("clinical_notes", ""),
    )

    total = sum(invoices.money(t["price"]) for t in tests)
    if not bill:
        order.payment_status = PaymentStatus.NOT_APPLICABLE
    elif total > 0:
        order.invoice = _bill(order)
        order.payment_status = PaymentStatus.PENDING_PAYMENT
    else:
        order.payment_status = PaymentStatus.PAID
    order.save(update_fields=["invoice", "payment_status", "updated_at"])
    logger.info("Created lab order %s for %s (%d tests)", order.order_number, order.patient_name, len(tests))
    return get_lab_order(order.pk)


@transaction.atomic
def update_lab_order(pk, data: dict) -> LabOrder:
    order = get_lab_order(pk)
    if order is None:
        raise NotFound("Lab order not found.")

    changed = [key for key in UPDATABLE_FIELDS if key in data]
    for key in changed:
        setattr(order, key, data[key])
    if "tests" in data:
        tests = [test_doc(t) for t in data["tests"] or []]
        if not tests:
            raise ValidationError({"tests": ["At least one test is required."]})
        order.tests = tests
        changed.append("tests")

    if changed:
        order.save(update_fields=changed + ["updated_at"])
    return get_lab_order(order.pk)


def next_status(order: LabOrder, tests: list) -> str:
    """
    Order status after a results entry.

    All tests entered: Results Ready when paid, otherwise Awaiting Verification.
    Otherwise the order advances one step from Pending Sample / Sample Collected.
    """
    entered = [t["status"] == LabStatus.RESULT_ENTERED for t in tests]
    if all(entered):
        return LabStatus.RESULTS_READY if order.payment_status == PaymentStatus.PAID else LabStatus.AWAITING_VERIFICATION
    if order.status == LabStatus.PENDING_SAMPLE:
        return LabStatus.SAMPLE_COLLECTED
    if order.status == LabStatus.SAMPLE_COLLECTED and any(entered):
        return LabStatus.PROCESSING
    return order.status


def results_update(order: LabOrder, tests: list, *, actor_name: str) -> dict:
    """Fields to write for a results entry; prices stay as ordered."""
    prices = {t["id"]: t.get("price") for t in order.tests}
    merged = [dict(t, price=prices.get(str(t.get("id")), t.get("price"))) for t in tests]
    status = next_status(order, [test_doc(t) for t in merged])
    data = {"tests": merged, "status": status}
    now = timezone.now()
    if status == LabStatus.RESULTS_READY and not order.verification_date:
        data.update(verification_date=now, verified_by=actor_name or "Lab Tech")
    if (order.status == LabStatus.PENDING_SAMPLE
            and status in (LabStatus.SAMPLE_COLLECTED, LabStatus.PROCESSING)
            and not order.sample_collection_date):
        data["sample_collection_date"] = now
    return data


def delete_lab_order(pk) -> None:
    deleted, _ = LabOrder.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("Lab order not found.")
