from django.contrib import admin
from .models import Shift

@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    list_display = ("staff_name", "date", "shift_type", "start_time", "end_time", "attendance_status")
    list_filter = ("shift_type", "attendance_status", "date")
    search_fields = ("staff_name", "notes")
