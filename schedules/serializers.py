from django.contrib.auth import get_user_model
from rest_framework import serializers

from .enums import AttendanceStatus, ShiftType
from .models import Shift

User = get_user_model()


class ShiftSerializer(serializers.ModelSerializer):
    staff = serializers.PrimaryKeyRelatedField(queryset=User.objects.all(), required=False, allow_null=True)
    shift_type_display = serializers.CharField(source="get_shift_type_display", read_only=True)
    attendance_status_display = serializers.CharField(source="get_attendance_status_display", read_only=True)

    class Meta:
        model = Shift
        fields = [
            "id","staff","staff_name","date","shift_type","shift_type_display",
            "start_time","end_time","notes",
            "attendance_status","attendance_status_display","actual_start_time","actual_end_time",
            "created_at","updated_at",
        ]
        read_only_fields = ["attendance_status","actual_start_time","actual_end_time","created_at","updated_at"]
        extra_kwargs = {"staff_name": {"required": False}}

    def validate(self, attrs):
        shift_type = attrs.get("shift_type", getattr(self.instance, "shift_type", None))
        start = attrs.get("start_time", getattr(self.instance, "start_time", None))
        end = attrs.get("end_time", getattr(self.instance, "end_time", None))
        if shift_type != ShiftType.DAY_OFF and (start is None or end is None):
            raise serializers.ValidationError({"start_time": "Start and End time are required for Day, Night, and Custom shifts."})
        if not attrs.get("staff") and not attrs.get("staff_name") and self.instance is None:
            raise serializers.ValidationError({"staff": "Staff member is required."})
        return attrs


class AttendanceSerializer(serializers.Serializer):
    attendance_status = serializers.ChoiceField(choices=AttendanceStatus.choices, required=False)
    actual_start_time = serializers.TimeField(format="%H:%M", input_formats=["%H:%M"], required=False)
    actual_end_time = serializers.TimeField(format="%H:%M", input_formats=["%H:%M"], required=False)
