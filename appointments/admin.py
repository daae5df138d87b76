from django.contrib import admin
from .models import Appointment

@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ("id","patient_name","provider_name","appt_type","status","date","time","payment_status","created_at")
    list_filter = ("status","appt_type","payment_status")
    search_fields = ("patient_name","provider_name","notes")
