from rest_framework import serializers

from patients.models import Patient
from .models import Consultation


class ConsultationSerializer(serializers.ModelSerializer):
    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    reason = serializers.CharField(read_only=True)
    time = serializers.SerializerMethodField()
    presenting_complaint = serializers.CharField(max_length=1000)
    assessment_diagnosis = serializers.CharField(max_length=2000)
    plan = serializers.CharField(max_length=2000)
    examination_findings = serializers.CharField(max_length=3000, required=False, allow_blank=True)

    class Meta:
        model = Consultation
        fields = [
            "id","patient","patient_name","doctor_name","consultation_date","time","reason",
            "presenting_complaint","history_of_presenting_complaint","past_medical_history",
            "medication_history","allergies","family_history","social_history","review_of_systems",
            "examination_findings","assessment_diagnosis","plan","status",
            "created_at","updated_at",
        ]
        read_only_fields = ["created_at","updated_at"]
        extra_kwargs = {
            "patient_name": {"required": False},
            "consultation_date": {"required": False},
            "doctor_name": {"required": False},
        }

    def get_time(self, obj):
        return f"{obj.consultation_date:%H:%M}" if obj.consultation_date else ""
