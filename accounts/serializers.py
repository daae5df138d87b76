from django.contrib.auth import authenticate
from rest_framework import serializers
from .enums import UserRole, UserStatus
from .models import User


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    def validate(self, data):
        user = authenticate(email=data["email"], password=data["password"])
        if not user:
            raise serializers.ValidationError("Invalid credentials")
        data["user"] = user
        return data


class UserSerializer(serializers.ModelSerializer):
    """Read shape of a user; the password never leaves the server."""
    name = serializers.CharField(source="display_name", read_only=True)

    class Meta:
        model = User
        fields = [
            "id", "name", "first_name", "last_name", "email",
            "role", "status", "office_number",
            "date_joined", "last_login",
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=300)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    role = serializers.ChoiceField(choices=UserRole.choices)
    status = serializers.ChoiceField(choices=UserStatus.choices)
    office_number = serializers.CharField(max_length=32, required=False, allow_blank=True)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name is required.")
        return value.strip()


class UserUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=300, required=False)
    email = serializers.EmailField(required=False)
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    status = serializers.ChoiceField(choices=UserStatus.choices, required=False)
    office_number = serializers.CharField(max_length=32, required=False, allow_blank=True)
    new_password = serializers.CharField(write_only=True, min_length=6, required=False)

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name cannot be empty.")
        return value.strip()

    def validate(self, data):
        if not data:
            raise serializers.ValidationError("No updatable fields provided.")
        return data
