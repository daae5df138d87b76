import logging

from django.apps import apps
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Patient

logger = logging.getLogger(__name__)

# models that keep a patient FK plus a patient_name copy
DENORMALIZED_PATIENT_NAME = (
    "appointments.Appointment",
    "labs.LabOrder",
    "billing.Invoice",
    "pharmacy.Prescription",
    "facilities.Admission",
    "facilities.Bed",
    "encounters.Consultation",
)


@receiver(post_save, sender=Patient, dispatch_uid="patients.cascade_patient_name")
def cascade_patient_name(sender, instance, created, raw=False, **kwargs):
    """Push a renamed patient onto every denormalized copy of the name."""
    if created or raw:
        return
    for label in DENORMALIZED_PATIENT_NAME:
        model = apps.get_model(label)
        stale = model.objects.filter(patient=instance).exclude(patient_name=instance.name)
        count = 0
        # save() per row so live containers receive the new snapshot
        for row in stale:
            row.patient_name = instance.name
            row.save(update_fields=["patient_name"])
            count += 1
        if count:
            logger.info("Renamed patient %s on %d %s rows", instance.pk, count, label)
