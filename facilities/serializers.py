from rest_framework import serializers

from patients.models import Patient
from .enums import BedStatus
from .models import Admission, Bed, Ward
from .services.wards import occupancy


class BedSerializer(serializers.ModelSerializer):
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Bed
        fields = ["id","ward","label","status","status_display","patient","patient_name"]
        read_only_fields = ["ward","patient","patient_name"]


class NewBedSerializer(serializers.Serializer):
    label = serializers.CharField(min_length=1, max_length=50)


class BedUpdateSerializer(serializers.Serializer):
    label = serializers.CharField(min_length=1, max_length=50, required=False)
    status = serializers.ChoiceField(choices=BedStatus.choices, required=False)


class WardSerializer(serializers.ModelSerializer):
    beds = BedSerializer(many=True, read_only=True)
    occupancy = serializers.SerializerMethodField()

    class Meta:
        model = Ward
        fields = ["id","name","description","beds","occupancy","created_at","updated_at"]
        read_only_fields = fields

    def get_occupancy(self, obj):
        return occupancy(obj)


class WardWriteSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=1, max_length=100)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True)
    desired_bed_count = serializers.IntegerField(min_value=0, required=False)


class AdmissionSerializer(serializers.ModelSerializer):
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    bed = serializers.PrimaryKeyRelatedField(queryset=Bed.objects.all())
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Admission
        fields = [
            "id","patient","patient_name","ward","ward_name","bed","bed_label",
            "admission_date","reason_for_admission","primary_doctor",
            "status","status_display","discharge_date","notes",
            "created_at","updated_at",
        ]
        read_only_fields = ["ward","ward_name","bed_label","discharge_date","created_at","updated_at"]
        extra_kwargs = {
            "patient_name": {"required": False},
            "admission_date": {"required": False},
        }


class AdmissionUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Admission
        fields = ["reason_for_admission","primary_doctor","status","notes","admission_date"]


class TransferSerializer(serializers.Serializer):
    bed = serializers.PrimaryKeyRelatedField(queryset=Bed.objects.all())


class DischargeSerializer(serializers.Serializer):
    discharge_date = serializers.DateTimeField(required=False)
