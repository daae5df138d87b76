from django.contrib import admin
from .models import Medication, Prescription

@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ("name", "dosage", "category", "stock", "status", "expiry_date", "price_per_unit")
    search_fields = ("name", "category", "supplier")
    list_filter = ("status", "category")

@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ("id", "patient_name", "medication_name", "quantity", "prescribed_by", "status", "payment_status", "date")
    list_filter = ("status", "payment_status", "is_billed")
    search_fields = ("patient_name", "medication_name", "prescribed_by")
