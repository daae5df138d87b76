from decimal import Decimal

from rest_framework import serializers

from patients.models import Patient
from .enums import LabStatus
from .models import LabOrder


class LabTestSerializer(serializers.Serializer):
    """One test on an order; ``price`` left out is looked up in the lab price list."""
    id = serializers.CharField(max_length=64, required=False)
    name = serializers.CharField(max_length=160)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0"), required=False, allow_null=True)
    status = serializers.ChoiceField(choices=LabStatus.choices, required=False)
    result = serializers.CharField(required=False, allow_blank=True)
    reference_range = serializers.CharField(max_length=120, required=False, allow_blank=True)
    unit = serializers.CharField(max_length=40, required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class LabOrderSerializer(serializers.ModelSerializer):
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    tests = LabTestSerializer(many=True, allow_empty=False)
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = LabOrder
        fields = [
            "id","order_number","patient","patient_name","ordering_doctor","order_date",
            "tests","status","status_display","clinical_notes",
            "sample_collection_date","sample_collector","verification_date","verified_by",
            "invoice","payment_status",
            "created_at","updated_at",
        ]
        read_only_fields = ["order_number","invoice","created_at","updated_at"]
        extra_kwargs = {
            "patient_name": {"required": False},
            "ordering_doctor": {"required": False},
            "order_date": {"required": False},
        }


class ResultsEntrySerializer(serializers.Serializer):
    tests = LabTestSerializer(many=True, allow_empty=False)
