from django.conf import settings
from django.db import models

from billing.enums import PaymentStatus
from .enums import LabStatus


class LabOrder(models.Model):
    """
    One order for one or more tests.

    ``tests`` is a list of documents:
    {id, name, price, status, result, reference_range, unit, notes}
    with price kept as a string ("25.00").
    """
    order_number = models.CharField(max_length=32, unique=True)
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="lab_orders")
    patient_name = models.CharField(max_length=255)
    ordering_doctor = models.CharField(max_length=255)
    ordered_by = models.ForeignKey(settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="lab_orders_created")
    order_date = models.DateTimeField()

    tests = models.JSONField(default=list)
    status = models.CharField(max_length=24, choices=LabStatus.choices, default=LabStatus.PENDING_SAMPLE)
    clinical_notes = models.TextField(blank=True)

    sample_collection_date = models.DateTimeField(null=True, blank=True)
    sample_collector = models.CharField(max_length=255, blank=True)
    verification_date = models.DateTimeField(null=True, blank=True)
    verified_by = models.CharField(max_length=255, blank=True)

    invoice = models.ForeignKey("billing.Invoice", null=True, blank=True, on_delete=models.SET_NULL, related_name="lab_orders")
    payment_status = models.CharField(max_length=16, choices=PaymentStatus.choices, default=PaymentStatus.PENDING_PAYMENT)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["patient", "order_date"], name="labs_labord_patient_4b8e21_idx"),
            models.Index(fields=["status"], name="labs_labord_status_91c3fa_idx"),
        ]
        ordering = ["-order_date", "-id"]

    def __str__(self):
        return f"{self.order_number} {self.patient_name}"
