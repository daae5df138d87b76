from django.contrib.auth import get_user_model
from rest_framework import serializers

from patients.models import Patient
from .models import Appointment

User = get_user_model()


class AppointmentSerializer(serializers.ModelSerializer):
    """
    Appointment with its display names. ``provider`` is optional; a booking can
    name a provider who has no account via ``provider_name`` alone.
    """
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    provider = serializers.PrimaryKeyRelatedField(queryset=User.objects.all(), required=False, allow_null=True)
    type = serializers.ChoiceField(source="appt_type", choices=Appointment._meta.get_field("appt_type").choices, required=False)
    type_display = serializers.CharField(source="get_appt_type_display", read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = Appointment
        fields = [
            "id","patient","patient_name","provider","provider_name",
            "date","time","type","type_display","status","status_display",
            "notes","invoice","payment_status",
            "created_by","created_at","updated_at",
        ]
        read_only_fields = ["invoice","payment_status","created_by","created_at","updated_at"]
        extra_kwargs = {
            "patient_name": {"required": False},
            "provider_name": {"required": False},
        }

    def validate(self, attrs):
        provider = attrs.get("provider", getattr(self.instance, "provider", None))
        provider_name = attrs.get("provider_name", getattr(self.instance, "provider_name", ""))
        if provider is None and not provider_name:
            raise serializers.ValidationError({"provider_name": "Provide a provider or a provider name."})
        return attrs
