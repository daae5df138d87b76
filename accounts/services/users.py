"""
Data access for staff accounts.

Callers pass validated payloads (see accounts.serializers); ``name`` is split
into first/last name on the way in.
"""
import logging

from django.db import transaction
from django.db.models import Q
from rest_framework.exceptions import NotFound

from core.exceptions import ConflictError
from accounts.models import User

logger = logging.getLogger(__name__)


def split_name(name: str) -> tuple[str, str]:
    parts = (name or "").strip().split(None, 1)
    if not parts:
        return "", ""
    return parts[0], (parts[1] if len(parts) > 1 else "")


def _email_taken(email: str, exclude_pk=None) -> bool:
    qs = User.objects.filter(email__iexact=email)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.exists()


def list_users(*, role=None, status=None, search=None):
    qs = User.objects.all()
    if role:
        qs = qs.filter(role=role)
    if status:
        qs = qs.filter(status=status)
    if search:
        qs = qs.filter(Q(email__icontains=search) | Q(first_name__icontains=search) | Q(last_name__icontains=search))
    return qs.order_by("-date_joined", "-id")


def get_user(pk):
    return User.objects.filter(pk=pk).first()


@transaction.atomic
def create_user(data: dict) -> User:
    email = data["email"].strip().lower()
    if _email_taken(email):
        raise ConflictError("A user with this email already exists.")
    first, last = split_name(data["name"])
    user = User.objects.create_user(
        email,
        password=data["password"],
        first_name=first,
        last_name=last,
        role=data["role"],
        status=data["status"],
        office_number=data.get("office_number", ""),
    )
    logger.info("Created user %s (%s)", user.pk, user.role)
    return user


@transaction.atomic
def update_user(pk, data: dict) -> User:
    user = get_user(pk)
    if user is None:
        raise NotFound("User not found.")

    changed = []
    if "email" in data:
        email = data["email"].strip().lower()
        if _email_taken(email, exclude_pk=user.pk):
            raise ConflictError("A user with this email already exists.")
        user.email = email
        changed.append("email")
    if "name" in data:
        user.first_name, user.last_name = split_name(data["name"])
        changed += ["first_name", "last_name"]
    for field in ("role", "status", "office_number"):
        if field in data:
            setattr(user, field, data[field])
            changed.append(field)
    if "status" in data:
        changed.append("is_active")
    if data.get("new_password"):
        user.set_password(data["new_password"])
        changed.append("password")

    if changed:
        user.save(update_fields=changed)
    return get_user(user.pk)


def delete_user(pk) -> None:
    deleted, _ = User.objects.filter(pk=pk).delete()
    if not deleted:
        raise NotFound("User not found.")
