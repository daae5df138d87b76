from django.contrib import admin
from .models import ActivityLog

@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ("id","verb","actor_name","actor_role","target_type","target_id","created_at")
    list_filter = ("verb","target_type","actor_role")
    search_fields = ("actor_name","action","target_id")
    readonly_fields = [f.name for f in ActivityLog._meta.fields]
