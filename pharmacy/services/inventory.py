import logging

from django.conf import settings
from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from pharmacy.enums import StockStatus
from pharmacy.models import Medication

logger = logging.getLogger(__name__)

FIELDS = ("name", "dosage", "category", "stock", "expiry_date", "supplier", "price_per_unit")


def list_medications(*, search=None, status=None):
    qs = Medication.objects.all()
    if search:
        qs = qs.filter(name__icontains=search)
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("name", "id")


def get_medication(pk):
    return Medication.objects.filter(pk=pk).first()


def find_medication(name: str):
    return Medication.objects.filter(name__iexact=(name or "").strip()).first()


def create_medication(data: dict) -> Medication:
    med = Medication.objects.create(**{k: data[k] for k in FIELDS if k in data})
    logger.info("Added medication %s (stock %s)", med.name, med.stock)
    return med


def update_medication(pk, data: dict) -> Medication:
    med = get_medication(pk)
    if med is None:
        raise NotFound("Medication not found.")
    changed = [k for k in FIELDS if k in data]
    for key in changed:
        setattr(med, key, data[key])
    if changed:
        med.save(update_fields=changed + ["updated_at"])
    return med


def delete_medication(pk) -> None:
    deleted, _ = Medication.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("Medication not found.")


@transaction.atomic
def adjust_stock(pk, delta: int) -> Medication:
    """Add (or with a negative delta remove) units; stock never goes below zero."""
    med = Medication.objects.select_for_update().filter(pk=pk).first()
    if med is None:
        raise NotFound("Medication not found.")
    if delta == 0:
        raise ValidationError({"delta": ["A non-zero quantity is required."]})
    med.stock = max(med.stock + delta, 0)
    med.save(update_fields=["stock", "updated_at"])
    return med


def low_stock():
    """Medications below the reorder threshold, emptiest first."""
    return Medication.objects.filter(
        status__in=[StockStatus.LOW_STOCK, StockStatus.OUT_OF_STOCK],
    ).order_by("stock", "name")


def low_stock_threshold() -> int:
    return settings.LOW_STOCK_THRESHOLD
