import logging

from django.conf import settings
from django.db import DatabaseError, transaction

from .enums import Verb
from .local import get_request, get_current_user
from .models import ActivityLog

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "System"


def _actor_snapshot(actor):
    if actor is None or not getattr(actor, "is_authenticated", False):
        actor = get_current_user()
    if actor is None:
        return None, SYSTEM_ACTOR, SYSTEM_ACTOR
    return actor, actor.get_role_display(), actor.display_name


def log_activity(*, action: str, actor=None, verb=Verb.ACTION, target_type: str = "", target_id="",
                 icon: str = "", link: str = "", details: dict | None = None,
                 actor_name: str | None = None, actor_role: str | None = None):
    """
    Fire-and-forget append to the activity log.

    A failed write is logged and swallowed; callers never see it.
    """
    user, role, name = _actor_snapshot(actor)
    req = get_request()
    meta = getattr(req, "META", {}) if req else {}
    try:
        with transaction.atomic():
            return ActivityLog.objects.create(
                actor=user,
                actor_role=(actor_role if actor_role is not None else role)[:64],
                actor_name=(actor_name or name)[:255],
                ip_address=meta.get("REMOTE_ADDR"),
                user_agent=meta.get("HTTP_USER_AGENT"),
                verb=verb,
                action=action[:255],
                target_type=target_type,
                target_id=str(target_id) if target_id not in (None, "") else "",
                target_link=link or "",
                icon=icon or "",
                details=details or {},
            )
    except DatabaseError:
        logger.warning("Failed to write activity log entry %r", action, exc_info=True)
        return None


def recent_activity(limit: int | None = None, role: str | None = None, entity_type: str | None = None):
    """Newest entries first, optionally narrowed by role / entity type substring."""
    limit = limit or settings.ACTIVITY_LOG_DEFAULT_LIMIT
    qs = ActivityLog.objects.all()
    if role:
        qs = qs.filter(actor_role__icontains=role)
    if entity_type:
        qs = qs.filter(target_type__icontains=entity_type)
    return list(qs.order_by("-created_at", "-id")[:limit])
