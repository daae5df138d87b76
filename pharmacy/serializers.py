from rest_framework import serializers

from patients.models import Patient
from .models import Medication, Prescription


class MedicationSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Medication
        fields = [
            "id","name","dosage","category","stock","expiry_date","supplier",
            "price_per_unit","status","status_display","created_at","updated_at",
        ]
        read_only_fields = ["status","created_at","updated_at"]

    def validate_stock(self, value):
        if value < 0:
            raise serializers.ValidationError("Stock cannot be negative.")
        return value


class StockAdjustSerializer(serializers.Serializer):
    delta = serializers.IntegerField()

    def validate_delta(self, value):
        if value == 0:
            raise serializers.ValidationError("A non-zero quantity is required.")
        return value


class PrescriptionSerializer(serializers.ModelSerializer):
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    quantity = serializers.IntegerField(min_value=1)
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Prescription
        fields = [
            "id","patient","patient_name","medication_name","dosage","quantity","instructions",
            "prescribed_by","date","status","status_display",
            "is_billed","invoice","payment_status","refillable","refills_remaining",
            "created_at","updated_at",
        ]
        read_only_fields = ["invoice","created_at","updated_at"]
        extra_kwargs = {
            "patient_name": {"required": False},
            "date": {"required": False},
        }
