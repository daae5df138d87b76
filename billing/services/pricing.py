from decimal import Decimal
from typing import Optional

from django.db import transaction
from rest_framework.exceptions import NotFound

from billing.enums import PriceCategory
from billing.models import GeneralFees, PriceItem


def get_general_fees() -> GeneralFees:
    return GeneralFees.load()


def update_general_fees(data: dict) -> GeneralFees:
    """Merge the given fee values into the single fees document."""
    fees = GeneralFees.load()
    changed = [k for k in ("consultation_fee", "checkup_fee") if k in data]
    for key in changed:
        setattr(fees, key, data[key])
    if changed:
        fees.save(update_fields=changed + ["updated_at"])
    return fees


def list_price_items(category: str):
    return PriceItem.objects.filter(category=category).order_by("name", "id")


def get_price_item(category: str, pk):
    return PriceItem.objects.filter(category=category, pk=pk).first()


def add_price_item(category: str, data: dict) -> PriceItem:
    return PriceItem.objects.create(category=category, name=data["name"], price=data["price"])


def update_price_item(category: str, pk, data: dict) -> PriceItem:
    item = get_price_item(category, pk)
    if item is None:
        raise NotFound("Price item not found.")
    changed = [k for k in ("name", "price") if k in data]
    for key in changed:
        setattr(item, key, data[key])
    if changed:
        item.save(update_fields=changed)
    return item


def delete_price_item(category: str, pk) -> None:
    deleted, _ = PriceItem.objects.filter(category=category, pk=pk).delete()
    if not deleted:
        raise NotFound("Price item not found.")


@transaction.atomic
def replace_price_items(category: str, items: list) -> list:
    """Replace the whole price list of a category."""
    PriceItem.objects.filter(category=category).delete()
    return [PriceItem.objects.create(category=category, name=i["name"], price=i["price"]) for i in items]


def resolve_price(*, category: str, name: str, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """Price of a named item in a category's list (case-insensitive), else ``default``."""
    item = PriceItem.objects.filter(category=category, name__iexact=(name or "").strip()).first()
    if item:
        return item.price
    return default


def lab_test_price(name: str) -> Decimal:
    return resolve_price(category=PriceCategory.LAB_TEST, name=name, default=Decimal("0.00"))
