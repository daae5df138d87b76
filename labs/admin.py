from django.contrib import admin
from .models import LabOrder

@admin.register(LabOrder)
class LabOrderAdmin(admin.ModelAdmin):
    list_display = ("order_number","patient_name","ordering_doctor","status","payment_status","order_date")
    list_filter = ("status","payment_status")
    search_fields = ("order_number","patient_name","ordering_doctor")
    readonly_fields = ("created_at","updated_at")
