from rest_framework import serializers

from .models import Patient


class SubDocumentSerializer(serializers.Serializer):
    """Nested JSON document; leaves missing from the stored value read as ""."""
    def to_representation(self, instance):
        doc = {name: "" for name in self.fields}
        doc.update(instance or {})
        return super().to_representation(doc)


class AddressSerializer(SubDocumentSerializer):
    line1 = serializers.CharField(max_length=200)
    line2 = serializers.CharField(max_length=200, required=False, allow_blank=True)
    city = serializers.CharField(max_length=120)
    state = serializers.CharField(max_length=120)
    postal_code = serializers.CharField(max_length=20)


class EmergencyContactSerializer(SubDocumentSerializer):
    name = serializers.CharField(max_length=120)
    relationship = serializers.CharField(max_length=64)
    number = serializers.CharField(max_length=32)


class InsuranceSerializer(SubDocumentSerializer):
    provider = serializers.CharField(max_length=120, required=False, allow_blank=True)
    policy_number = serializers.CharField(max_length=64, required=False, allow_blank=True)


class MedicationSerializer(SubDocumentSerializer):
    name = serializers.CharField(max_length=160)
    dosage = serializers.CharField(max_length=64, allow_blank=True)
    frequency = serializers.CharField(max_length=64, allow_blank=True)


class PatientSerializer(serializers.ModelSerializer):
    name = serializers.CharField(read_only=True)
    age = serializers.IntegerField(read_only=True)

    address = AddressSerializer()
    emergency_contact = EmergencyContactSerializer()
    insurance = InsuranceSerializer(required=False, allow_null=True)
    # always a list on the wire; a comma-joined string is rejected
    allergies = serializers.ListField(child=serializers.CharField(max_length=120), required=False)
    current_medications = MedicationSerializer(many=True, required=False)

    class Meta:
        model = Patient
        fields = [
            "id","name","first_name","last_name","gender","date_of_birth","age",
            "contact_number","email",
            "address","emergency_contact","insurance",
            "allergies","current_medications","medical_history_notes",
            "last_visit","status","profile_picture_url",
            "created_at","updated_at",
        ]
        read_only_fields = ["created_at","updated_at"]
