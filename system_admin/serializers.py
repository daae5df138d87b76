from rest_framework import serializers

from .services import CURRENCIES, DEFAULT_THEME_COLORS

HH_MM = r"^([01]\d|2[0-3]):[0-5]\d$"


class ThemeColorsSerializer(serializers.Serializer):
    # HSL triplets as used by the UI theme, e.g. "210 50% 60%"
    background = serializers.CharField(max_length=32, required=False)
    foreground = serializers.CharField(max_length=32, required=False)
    primary = serializers.CharField(max_length=32, required=False)
    accent = serializers.CharField(max_length=32, required=False)


class AppSettingsSerializer(serializers.Serializer):
    logo_width = serializers.IntegerField(min_value=10, max_value=1000, required=False)
    logo_data_url = serializers.CharField(required=False, allow_blank=True)
    theme_colors = ThemeColorsSerializer(required=False)
    currency = serializers.ChoiceField(choices=CURRENCIES, required=False)
    default_appointment_duration = serializers.IntegerField(min_value=5, max_value=480, required=False)
    clinic_open_time = serializers.RegexField(HH_MM, required=False)
    clinic_close_time = serializers.RegexField(HH_MM, required=False)
    patient_portal_enabled = serializers.BooleanField(required=False)
    reminder_lead_time = serializers.IntegerField(min_value=0, max_value=168, required=False)

    def validate_logo_data_url(self, value):
        if value and not value.startswith("data:image/"):
            raise serializers.ValidationError("Logo must be an image data URL.")
        return value

    def validate(self, data):
        if not data:
            raise serializers.ValidationError("No settings provided.")
        opens = data.get("clinic_open_time")
        closes = data.get("clinic_close_time")
        if opens and closes and opens >= closes:
            raise serializers.ValidationError({"clinic_close_time": "Closing time must be after opening time."})
        return data

    def merged_theme(self, current: dict) -> dict:
        colors = dict(DEFAULT_THEME_COLORS)
        colors.update(current or {})
        colors.update(self.validated_data.get("theme_colors", {}))
        return colors
