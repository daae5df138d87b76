from django.contrib import admin
from .models import GeneralFees, PriceItem, Invoice

@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ("invoice_number","patient_name","date","due_date","total_amount","amount_paid","status")
    list_filter = ("status",)
    search_fields = ("invoice_number","patient_name")
    readonly_fields = ("invoice_number","created_at","updated_at")

@admin.register(PriceItem)
class PriceItemAdmin(admin.ModelAdmin):
    list_display = ("name","category","price")
    list_filter = ("category",)
    search_fields = ("name",)

admin.site.register(GeneralFees)
