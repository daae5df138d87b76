from django.db import models

class InvoiceStatus(models.TextChoices):
    DRAFT = "DRAFT","Draft"
    PENDING_PAYMENT = "PENDING_PAYMENT","Pending Payment"
    PARTIALLY_PAID = "PARTIALLY_PAID","Partially Paid"
    PAID = "PAID","Paid"
    OVERDUE = "OVERDUE","Overdue"
    CANCELLED = "CANCELLED","Cancelled"
    AWAITING_PUSH_PAYMENT = "AWAITING_PUSH_PAYMENT","Awaiting Push Payment"
    BILLED = "BILLED","Billed"

class PaymentStatus(models.TextChoices):
    """Denormalized payment state carried by appointments, lab orders and prescriptions."""
    PENDING_PAYMENT = "PENDING_PAYMENT","Pending Payment"
    PARTIALLY_PAID = "PARTIALLY_PAID","Partially Paid"
    PAID = "PAID","Paid"
    BILLED = "BILLED","Billed"
    NOT_APPLICABLE = "N_A","N/A"

class PriceCategory(models.TextChoices):
    LAB_TEST = "LAB_TEST","Lab Test"
    OTHER_SERVICE = "OTHER_SERVICE","Other Service"
    WARD_TARIFF = "WARD_TARIFF","Ward Tariff"

class LineItemSource(models.TextChoices):
    APPOINTMENT = "APPOINTMENT","Appointment"
    LAB_ORDER = "LAB_ORDER","Lab Order"
    PRESCRIPTION = "PRESCRIPTION","Prescription"
    ADMISSION = "ADMISSION","Admission"
    MANUAL = "MANUAL","Manual"
