import logging

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Shift

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL, dispatch_uid="schedules.cascade_staff_name")
def cascade_staff_name(sender, instance, created, raw=False, **kwargs):
    """Keep staff_name on a renamed user's shifts current."""
    if created or raw:
        return
    for shift in Shift.objects.filter(staff=instance).exclude(staff_name=instance.display_name):
        shift.staff_name = instance.display_name
        shift.save(update_fields=["staff_name"])
        logger.info("Shift %s staff renamed to %s", shift.pk, instance.display_name)
