# PATH: apps/domains/results/serializers/result.py
from rest_framework import serializers

from apps.domains.results.models import ExamResult


class ExamResultSerializer(serializers.Serializer):
    """Domain ExamResult -> camelCase payload."""

    id = serializers.IntegerField()
    examId = serializers.IntegerField(source="exam_id")
    examTitle = serializers.CharField(source="exam_title")
    status = serializers.CharField(source="status.value")
    startedAt = serializers.DateTimeField(source="started_at")
    completedAt = serializers.DateTimeField(source="completed_at", allow_null=True)
    totalQuestions = serializers.IntegerField(source="total_questions")
    totalScore = serializers.IntegerField(source="total_score")
    percentage = serializers.IntegerField()


class ExamAnswerSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    questionId = serializers.IntegerField(source="question_id")
    selectedAnswer = serializers.IntegerField(source="selected_answer")
    isCorrect = serializers.BooleanField(source="is_correct")
    timeSpent = serializers.IntegerField(source="time_spent", allow_null=True)


class AnswerInputSerializer(serializers.Serializer):
    questionId = serializers.IntegerField(min_value=1)
    selectedAnswer = serializers.IntegerField()
    timeSpent = serializers.IntegerField(required=False, allow_null=True, default=None)


class ReportSummarySerializer(serializers.Serializer):
    """Stored report row (ORM) in list payloads."""

    id = serializers.IntegerField()
    strengths = serializers.ListField(child=serializers.CharField())
    weaknesses = serializers.ListField(child=serializers.CharField())
    recommendations = serializers.ListField(child=serializers.CharField())
    contentBreakdown = serializers.JSONField(source="content_breakdown")
    assignedProfessor = serializers.CharField(source="assigned_professor", allow_null=True)
    professorSubject = serializers.CharField(source="professor_subject", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")


class ProfileResultSerializer(serializers.ModelSerializer):
    """ORM ExamResult with its exam title and report, for profile / my-results."""

    examId = serializers.IntegerField(source="exam_id", read_only=True)
    examTitle = serializers.CharField(source="exam.title", read_only=True)
    examDescription = serializers.CharField(source="exam.description", read_only=True)
    startedAt = serializers.DateTimeField(source="started_at", read_only=True)
    completedAt = serializers.DateTimeField(source="completed_at", read_only=True)
    totalQuestions = serializers.IntegerField(source="total_questions", read_only=True)
    totalScore = serializers.IntegerField(source="total_score", read_only=True)
    report = serializers.SerializerMethodField()

    class Meta:
        model = ExamResult
        fields = [
            "id",
            "examId",
            "examTitle",
            "examDescription",
            "status",
            "startedAt",
            "completedAt",
            "totalQuestions",
            "totalScore",
            "percentage",
            "report",
        ]
        read_only_fields = fields

    def get_report(self, obj):
        # reverse one-to-one raises RelatedObjectDoesNotExist (an AttributeError) when absent
        report = getattr(obj, "report", None)
        return ReportSummarySerializer(report).data if report is not None else None
