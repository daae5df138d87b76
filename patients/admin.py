from django.contrib import admin
from .models import Patient

@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("last_name","first_name","date_of_birth","gender","status","last_visit","created_at")
    search_fields = ("last_name","first_name","email","contact_number")
    list_filter = ("status","gender")
    readonly_fields = ("created_at","updated_at")
