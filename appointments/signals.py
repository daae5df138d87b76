import logging

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Appointment

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL, dispatch_uid="appointments.cascade_provider_name")
def cascade_provider_name(sender, instance, created, raw=False, **kwargs):
    """Keep provider_name on a renamed user's appointments current."""
    if created or raw:
        return
    for appt in Appointment.objects.filter(provider=instance).exclude(provider_name=instance.display_name):
        appt.provider_name = instance.display_name
        appt.save(update_fields=["provider_name"])
        logger.info("Appointment %s provider renamed to %s", appt.pk, instance.display_name)
