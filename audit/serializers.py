from rest_framework import serializers
from .models import ActivityLog


class ActivityLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = ActivityLog
        fields = [
            "id",
            "actor",
            "actor_role",
            "actor_name",
            "verb",
            "action",
            "target_type",
            "target_id",
            "target_link",
            "icon",
            "details",
            "created_at",
        ]
        read_only_fields = ["id", "actor", "verb", "created_at"]
        extra_kwargs = {
            "actor_role": {"required": False},
            "target_type": {"required": False},
            "target_id": {"required": False},
            "target_link": {"required": False},
            "icon": {"required": False},
            "details": {"required": False},
        }

    def validate_action(self, value):
        if not value.strip():
            raise serializers.ValidationError("Action description is required.")
        return value

    def validate_actor_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Actor name is required.")
        return value
