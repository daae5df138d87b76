from django.contrib import admin
from .models import Ward, Bed, Admission


class BedInline(admin.TabularInline):
    model = Bed
    extra = 0
    fields = ("label", "status", "patient", "patient_name")
    raw_id_fields = ("patient",)


@admin.register(Ward)
class WardAdmin(admin.ModelAdmin):
    list_display = ("name", "description", "created_at")
    search_fields = ("name",)
    inlines = [BedInline]


@admin.register(Bed)
class BedAdmin(admin.ModelAdmin):
    list_display = ("ward", "label", "status", "patient_name")
    list_filter = ("status", "ward")
    search_fields = ("label", "patient_name")


@admin.register(Admission)
class AdmissionAdmin(admin.ModelAdmin):
    list_display = ("patient_name", "ward_name", "bed_label", "status", "admission_date", "discharge_date")
    list_filter = ("status",)
    search_fields = ("patient_name", "primary_doctor")
