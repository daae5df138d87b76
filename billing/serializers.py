from decimal import Decimal

from rest_framework import serializers

from patients.models import Patient
from .models import GeneralFees, PriceItem, Invoice


class LineItemSerializer(serializers.Serializer):
    description = serializers.CharField(max_length=255)
    quantity = serializers.IntegerField(min_value=1, default=1)
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    total = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False)
    source_type = serializers.CharField(max_length=32, required=False, allow_blank=True)
    source_id = serializers.CharField(max_length=64, required=False, allow_blank=True)


class InvoiceSerializer(serializers.ModelSerializer):
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    line_items = LineItemSerializer(many=True, allow_empty=False)
    balance = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    appointment = serializers.SerializerMethodField()

    class Meta:
        model = Invoice
        fields = [
            "id","invoice_number","patient","patient_name",
            "date","due_date","line_items",
            "sub_total","tax_rate","tax_amount","total_amount","amount_paid","balance",
            "status","notes","source","appointment",
            "created_at","updated_at",
        ]
        read_only_fields = ["invoice_number","sub_total","created_at","updated_at"]
        extra_kwargs = {
            "patient_name": {"required": False},
            "date": {"required": False},
            "due_date": {"required": False},
            "tax_amount": {"required": False},
            "total_amount": {"required": False},
        }

    def get_appointment(self, obj):
        appt = obj.appointments.only("id").first()
        return appt.id if appt else None


class GeneralFeesSerializer(serializers.ModelSerializer):
    class Meta:
        model = GeneralFees
        fields = ["consultation_fee","checkup_fee","updated_at"]
        read_only_fields = ["updated_at"]


class PriceItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = PriceItem
        fields = ["id","name","price"]


class NewPriceItemSerializer(PriceItemSerializer):
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.01"))


class WardTariffSerializer(serializers.ModelSerializer):
    ward_name = serializers.CharField(source="name", max_length=160)
    per_diem_rate = serializers.DecimalField(source="price", max_digits=12, decimal_places=2, min_value=0)

    class Meta:
        model = PriceItem
        fields = ["id","ward_name","per_diem_rate"]


class NewWardTariffSerializer(WardTariffSerializer):
    per_diem_rate = serializers.DecimalField(source="price", max_digits=12, decimal_places=2, min_value=Decimal("0.01"))
