# PATH: apps/domains/exams/serializers/question.py
from rest_framework import serializers

from exampass.adapters.db.django import repositories_professors as professor_repo
from exampass.domain.exams.entities import ALTERNATIVES_PER_QUESTION
from exampass.domain.exams.errors import NotFoundError

from apps.domains.exams.models import Question


class QuestionProfessorSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    subject = serializers.CharField(read_only=True)


class QuestionSerializer(serializers.ModelSerializer):
    """Admin read/write. correctAnswer is only rendered for ADMIN requests."""

    alternatives = serializers.ListField(
        child=serializers.CharField(allow_blank=True, trim_whitespace=True),
    )
    correctAnswer = serializers.IntegerField(
        source="correct_answer",
        min_value=0,
        max_value=ALTERNATIVES_PER_QUESTION - 1,
    )
    educationalIndicator = serializers.CharField(source="educational_indicator", max_length=255)
    isActive = serializers.BooleanField(source="is_active", required=False)
    professorId = serializers.IntegerField(source="professor_id", write_only=True)
    professor = QuestionProfessorSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Question
        fields = [
            "id",
            "header",
            "alternatives",
            "correctAnswer",
            "educationalIndicator",
            "isActive",
            "professorId",
            "professor",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if request is not None and not getattr(user, "is_admin_role", False):
            data.pop("correctAnswer", None)
        return data

    def validate_header(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("The question header is required.")
        return value

    def validate_alternatives(self, value):
        if len(value) != ALTERNATIVES_PER_QUESTION:
            raise serializers.ValidationError(
                f"Exactly {ALTERNATIVES_PER_QUESTION} alternatives are required."
            )
        cleaned = [(alt or "").strip() for alt in value]
        if any(not alt for alt in cleaned):
            raise serializers.ValidationError("Alternatives cannot be empty.")
        return cleaned

    def validate_educationalIndicator(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("The educational indicator is required.")
        return value

    def validate_professorId(self, value):
        if not professor_repo.professor_exists(value):
            raise NotFoundError("Professor not found.")
        return value


class StudentQuestionSerializer(serializers.Serializer):
    """Question as a student sees it while taking an exam (no correct answer)."""

    id = serializers.IntegerField()
    order = serializers.IntegerField(allow_null=True)
    header = serializers.CharField()
    alternatives = serializers.ListField(child=serializers.CharField())
    educationalIndicator = serializers.CharField(source="educational_indicator")
    professorName = serializers.CharField(source="professor_name")
    subject = serializers.CharField()
