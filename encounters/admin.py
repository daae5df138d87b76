from django.contrib import admin
from .models import Consultation

@admin.register(Consultation)
class ConsultationAdmin(admin.ModelAdmin):
    list_display = ("id", "patient_name", "doctor_name", "consultation_date", "status", "reason")
    list_filter = ("status",)
    search_fields = ("patient_name", "doctor_name", "presenting_complaint", "assessment_diagnosis")
