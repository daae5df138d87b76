from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User

@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("email","first_name","last_name","role","status","last_login")
    list_filter = ("role","status","is_staff")
    search_fields = ("email","first_name","last_name")
    ordering = ("-date_joined",)
    fieldsets = (
        (None, {"fields": ("email","password")}),
        ("Profile", {"fields": ("first_name","last_name","role","status","office_number")}),
        ("Permissions", {"fields": ("is_staff","is_superuser","groups","user_permissions")}),
        ("Dates", {"fields": ("last_login","date_joined")}),
    )
    add_fieldsets = (
        (None, {"classes": ("wide",), "fields": ("email","role","password1","password2")}),
    )
