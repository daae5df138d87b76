from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from billing.enums import PaymentStatus
from .enums import StockStatus, RxStatus


def stock_status(stock: int) -> str:
    if stock <= 0:
        return StockStatus.OUT_OF_STOCK
    if stock < settings.LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class Medication(models.Model):
    """
    Inventory line. ``status`` is derived from ``stock`` on every save.
    """
    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=64, blank=True)     # e.g. 500mg
    category = models.CharField(max_length=120, blank=True)  # Analgesic, Antibiotic...
    stock = models.IntegerField(default=0)
    expiry_date = models.DateField(null=True, blank=True)
    supplier = models.CharField(max_length=255, blank=True)
    price_per_unit = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    status = models.CharField(max_length=16, choices=StockStatus.choices, default=StockStatus.OUT_OF_STOCK, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name", "id"]
        indexes = [models.Index(fields=["status"], name="pharmacy_me_status_2d7b0e_idx")]

    def save(self, *args, **kwargs):
        self.status = stock_status(self.stock)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "stock" in update_fields:
            kwargs["update_fields"] = set(update_fields) | {"status"}
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} {self.dosage}".strip()


class Prescription(models.Model):
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="prescriptions")
    patient_name = models.CharField(max_length=255)
    medication_name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=64)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    instructions = models.TextField(blank=True)
    prescribed_by = models.CharField(max_length=255)
    date = models.DateField(default=timezone.localdate)
    status = models.CharField(max_length=24, choices=RxStatus.choices, default=RxStatus.PENDING)

    is_billed = models.BooleanField(default=False)
    invoice = models.ForeignKey("billing.Invoice", null=True, blank=True, on_delete=models.SET_NULL, related_name="prescriptions")
    payment_status = models.CharField(max_length=16, choices=PaymentStatus.choices, default=PaymentStatus.NOT_APPLICABLE)

    refillable = models.BooleanField(default=False)
    refills_remaining = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=["patient", "date"], name="pharmacy_pr_patient_6e1a93_idx"),
            models.Index(fields=["status"], name="pharmacy_pr_status_b40f5c_idx"),
        ]
        ordering = ["-date", "-id"]

    def __str__(self):
        return f"Rx#{self.id} {self.medication_name} for {self.patient_name}"
