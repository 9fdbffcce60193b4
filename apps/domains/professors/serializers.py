# PATH: apps/domains/professors/serializers.py
from rest_framework import serializers

from .models import Professor


def _trimmed_min2(value: str, label: str) -> str:
    value = (value or "").strip()
    if len(value) < 2:
        raise serializers.ValidationError(f"{label} must be at least 2 characters long.")
    return value


class ProfessorQuestionSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    header = serializers.CharField(read_only=True)
    educationalIndicator = serializers.CharField(source="educational_indicator", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)


class ProfessorSerializer(serializers.ModelSerializer):
    questionsCount = serializers.IntegerField(source="questions_count", read_only=True, default=0)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Professor
        fields = [
            "id",
            "name",
            "subject",
            "email",
            "phone",
            "bio",
            "status",
            "questionsCount",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id", "status"]
        # (name, subject) uniqueness is checked by ProfessorService -> 409
        validators = []

    def validate_name(self, value):
        return _trimmed_min2(value, "Name")

    def validate_subject(self, value):
        return _trimmed_min2(value, "Subject")

    def validate_phone(self, value):
        return (value or "").strip() or None

    def validate_bio(self, value):
        return (value or "").strip()


class ProfessorDetailSerializer(ProfessorSerializer):
    questions = serializers.SerializerMethodField()

    class Meta(ProfessorSerializer.Meta):
        fields = ProfessorSerializer.Meta.fields + ["questions"]

    def get_questions(self, obj):
        return ProfessorQuestionSerializer(obj.questions.order_by("-created_at", "-id"), many=True).data
