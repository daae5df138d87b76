"""
Wards and their beds.

A ward is sized by ``desired_bed_count``: growing adds "Bed N" rows numbered
after the highest existing number, shrinking removes free beds in the order
Available, Needs Cleaning, Maintenance. Occupied beds are never removed.
"""
import logging
import re

from django.db import transaction
from django.db.models import Prefetch
from rest_framework.exceptions import NotFound

from core.exceptions import ConflictError
from facilities.enums import BedStatus
from facilities.models import Bed, Ward

logger = logging.getLogger(__name__)

SHRINK_ORDER = (BedStatus.AVAILABLE, BedStatus.NEEDS_CLEANING, BedStatus.MAINTENANCE)
_DIGITS = re.compile(r"\d+")


def _with_beds(qs):
    return qs.prefetch_related(Prefetch("beds", queryset=Bed.objects.order_by("id")))


def list_wards():
    return _with_beds(Ward.objects.all()).order_by("name")


def get_ward(pk):
    return _with_beds(Ward.objects.filter(pk=pk)).first()


def _require_ward(pk) -> Ward:
    ward = get_ward(pk)
    if ward is None:
        raise NotFound("Ward not found.")
    return ward


def _check_name(name, exclude_pk=None):
    qs = Ward.objects.filter(name__iexact=name.strip())
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        raise ConflictError(f'Ward with name "{name}" already exists')


def bed_number(label: str) -> int:
    digits = "".join(_DIGITS.findall(label or ""))
    return int(digits) if digits else 0


def _grow(ward: Ward, count: int):
    beds = list(ward.beds.all())
    start = max([bed_number(b.label) for b in beds] + [0]) + 1
    Bed.objects.bulk_create([Bed(ward=ward, label=f"Bed {start + i}") for i in range(count)])


def _shrink(ward: Ward, count: int) -> int:
    """Remove up to ``count`` free beds; returns how many were removed."""
    removed = 0
    for status in SHRINK_ORDER:
        if removed >= count:
            break
        ids = list(ward.beds.filter(status=status).order_by("id").values_list("id", flat=True)[:count - removed])
        Bed.objects.filter(id__in=ids).delete()
        removed += len(ids)
    if removed < count:
        logger.warning(
            "Ward %s: could not remove %d beds as the remaining ones are occupied",
            ward.pk, count - removed,
        )
    return removed


def resize(ward: Ward, desired: int):
    current = ward.beds.count()
    if desired > current:
        _grow(ward, desired - current)
    elif desired < current:
        _shrink(ward, current - desired)


@transaction.atomic
def create_ward(data: dict) -> Ward:
    _check_name(data["name"])
    ward = Ward.objects.create(name=data["name"].strip(), description=data.get("description", ""))
    if data.get("desired_bed_count"):
        _grow(ward, data["desired_bed_count"])
    logger.info("Created ward %s with %s beds", ward.name, data.get("desired_bed_count") or 0)
    return get_ward(ward.pk)


@transaction.atomic
def update_ward(pk, data: dict) -> Ward:
    ward = _require_ward(pk)
    changed = []
    if "name" in data and data["name"].strip().lower() != ward.name.lower():
        _check_name(data["name"], exclude_pk=ward.pk)
    if "name" in data:
        ward.name = data["name"].strip()
        changed.append("name")
    if "description" in data:
        ward.description = data["description"]
        changed.append("description")
    if changed:
        ward.save(update_fields=changed + ["updated_at"])
    if data.get("desired_bed_count") is not None:
        resize(ward, data["desired_bed_count"])
    return get_ward(ward.pk)


@transaction.atomic
def delete_ward(pk) -> None:
    ward = _require_ward(pk)
    if ward.beds.filter(status=BedStatus.OCCUPIED).exists():
        raise ConflictError(f'Ward "{ward.name}" has occupied beds and cannot be deleted.')
    ward.delete()


# ---------------------------------------------------------------- beds
def get_bed(ward_pk, bed_pk) -> Bed:
    bed = Bed.objects.select_related("ward").filter(ward_id=ward_pk, pk=bed_pk).first()
    if bed is None:
        raise NotFound("Bed not found in this ward.")
    return bed


def _check_label(ward_pk, label, exclude_pk=None):
    qs = Bed.objects.filter(ward_id=ward_pk, label__iexact=label.strip())
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    if qs.exists():
        raise ConflictError(f'Bed with label "{label}" already exists in this ward.')


@transaction.atomic
def add_bed(ward_pk, label: str) -> Ward:
    ward = _require_ward(ward_pk)
    _check_label(ward.pk, label)
    Bed.objects.create(ward=ward, label=label.strip())
    return get_ward(ward.pk)


@transaction.atomic
def update_bed(ward_pk, bed_pk, data: dict) -> Bed:
    """Relabel a bed or change its housekeeping status; occupancy is managed by admissions."""
    bed = get_bed(ward_pk, bed_pk)
    changed = []
    if "label" in data:
        _check_label(ward_pk, data["label"], exclude_pk=bed.pk)
        bed.label = data["label"].strip()
        changed.append("label")
    if "status" in data and data["status"] != bed.status:
        if BedStatus.OCCUPIED in (bed.status, data["status"]):
            raise ConflictError("Occupancy changes go through admissions, discharges and transfers.")
        bed.status = data["status"]
        changed.append("status")
    if changed:
        bed.save(update_fields=changed)
    return bed


@transaction.atomic
def delete_bed(ward_pk, bed_pk) -> Ward:
    bed = get_bed(ward_pk, bed_pk)
    if bed.status == BedStatus.OCCUPIED:
        raise ConflictError(f'Bed "{bed.label}" is occupied and cannot be deleted.')
    bed.delete()
    return get_ward(ward_pk)


def occupancy(ward: Ward) -> dict:
    counts = {status: 0 for status in BedStatus.values}
    for bed in ward.beds.all():
        counts[bed.status] += 1
    return {"total": sum(counts.values()), **{k.lower(): v for k, v in counts.items()}}
