# PATH: apps/domains/exams/serializers/exam.py
from django.conf import settings
from rest_framework import serializers

from exampass.adapters.db.django import repositories_exams as exam_repo

from apps.domains.exams.models import Exam
from apps.domains.exams.serializers.question import QuestionSerializer, StudentQuestionSerializer


class ExamQuestionSerializer(serializers.Serializer):
    order = serializers.IntegerField(read_only=True)
    question = QuestionSerializer(read_only=True)


class ExamSerializer(serializers.ModelSerializer):
    timeLimit = serializers.IntegerField(source="time_limit", read_only=True, allow_null=True)
    totalQuestions = serializers.IntegerField(source="total_questions", read_only=True)
    resultsCount = serializers.IntegerField(source="results_count", read_only=True, default=0)
    questionsCount = serializers.IntegerField(source="questions_count", read_only=True, default=0)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Exam
        fields = [
            "id",
            "title",
            "description",
            "status",
            "timeLimit",
            "totalQuestions",
            "resultsCount",
            "questionsCount",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


class ExamDetailSerializer(ExamSerializer):
    """Admin view: the exam plus its questions in exam order."""
    questions = serializers.SerializerMethodField()

    class Meta(ExamSerializer.Meta):
        fields = ExamSerializer.Meta.fields + ["questions"]
        read_only_fields = fields

    def get_questions(self, obj):
        return ExamQuestionSerializer(exam_repo.exam_links_ordered(obj.pk), many=True).data


class ExamGenerateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    status = serializers.ChoiceField(choices=Exam.Status.choices, default=Exam.Status.DRAFT)
    # minutes; 0 or null = unlimited
    timeLimit = serializers.IntegerField(required=False, allow_null=True, min_value=0, default=None)
    questionIds = serializers.ListField(child=serializers.IntegerField(min_value=1))

    def validate_title(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("The exam title is required.")
        return value

    def validate_description(self, value):
        return (value or "").strip()

    def validate_questionIds(self, value):
        limit = settings.EXAM_MAX_QUESTIONS
        if not value:
            raise serializers.ValidationError("Select at least one question.")
        if len(value) > limit:
            raise serializers.ValidationError(f"An exam can have at most {limit} questions.")
        if len(set(value)) != len(value):
            raise serializers.ValidationError("A question cannot appear twice in the same exam.")
        return value


class ExamStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Exam.Status.choices)


class StudentExamSerializer(serializers.Serializer):
    """Domain Exam + its questions, as served to students."""

    id = serializers.IntegerField()
    title = serializers.CharField()
    description = serializers.CharField()
    status = serializers.CharField(source="status.value")
    timeLimit = serializers.IntegerField(source="time_limit", allow_null=True)
    totalQuestions = serializers.IntegerField(source="total_questions")
