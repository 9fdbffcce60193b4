# apps/core/serializers.py

from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from exampass.adapters.db.django import repositories_core as core_repo

User = get_user_model()


# ------------------------------------
# User
# ------------------------------------

class UserSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "name", "role", "createdAt"]
        read_only_fields = fields


# ------------------------------------
# Register
# ------------------------------------

class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)
    name = serializers.CharField(max_length=100)
    role = serializers.ChoiceField(choices=User.Role.choices, default=User.Role.STUDENT)

    def validate_email(self, value):
        value = value.strip().lower()
        if core_repo.user_exists_email(value):
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        return value

    def validate_role(self, value):
        # only an authenticated admin may create another admin
        request = self.context.get("request")
        caller = getattr(request, "user", None)
        if value == User.Role.ADMIN and not (
            caller and caller.is_authenticated and getattr(caller, "role", None) == User.Role.ADMIN
        ):
            raise serializers.ValidationError("Only administrators can create administrator accounts.")
        return value

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        return core_repo.user_create(
            email=validated_data["email"],
            password=validated_data["password"],
            name=validated_data["name"],
            role=validated_data["role"],
        )
