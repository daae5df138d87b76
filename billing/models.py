from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import models

from .enums import InvoiceStatus, PriceCategory

class GeneralFees(models.Model):
    """
    Single-row document holding the flat consultation / check-up fees.
    """
    consultation_fee = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)], default=Decimal("75.00"))
    checkup_fee = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)], default=Decimal("50.00"))
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = "general fees"

    @classmethod
    def load(cls) -> "GeneralFees":
        obj, _ = cls.objects.get_or_create(pk=1)
        return obj

    def __str__(self): return f"Consultation {self.consultation_fee} / Check-up {self.checkup_fee}"

class PriceItem(models.Model):
    """
    Price list entry (lab test, other service, ward tariff per diem).
    """
    category = models.CharField(max_length=16, choices=PriceCategory.choices)
    name = models.CharField(max_length=160)
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])

    class Meta:
        ordering = ["category","name","id"]

    def __str__(self): return f"{self.get_category_display()}: {self.name} ({self.price})"

class Invoice(models.Model):
    invoice_number = models.CharField(max_length=32, unique=True)   # INV2024-00001
    patient = models.ForeignKey("patients.Patient", null=True, blank=True, on_delete=models.SET_NULL, related_name="invoices")
    patient_name = models.CharField(max_length=255)

    date = models.DateField()
    due_date = models.DateField()

    # [{description, quantity, unit_price, total, source_type, source_id}]
    line_items = models.JSONField(default=list)
    sub_total = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)], default=0)
    tax_rate = models.DecimalField(max_digits=5, decimal_places=2, validators=[MinValueValidator(0)], default=0)
    tax_amount = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)], default=0)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)])
    amount_paid = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(0)], default=0)

    status = models.CharField(max_length=24, choices=InvoiceStatus.choices, default=InvoiceStatus.PENDING_PAYMENT)
    notes = models.TextField(blank=True)
    source = models.CharField(max_length=64, blank=True)  # e.g. "appointment", "lab", "manual"

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date","-id"]

    @property
    def balance(self) -> Decimal:
        return max(self.total_amount - self.amount_paid, Decimal("0"))

    def __str__(self): return f"{self.invoice_number} {self.patient_name} ({self.status})"
