# PATH: apps/domains/results/serializers/report.py
"""
Report / statistics payloads. Inputs are exampass dataclasses, not ORM rows,
except ReportListSerializer which pages over the ExamReport queryset.
"""
from rest_framework import serializers

from apps.domains.results.models import ExamReport
from apps.domains.results.serializers.result import ExamResultSerializer


class ReportSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    examResultId = serializers.IntegerField(source="exam_result_id")
    contentBreakdown = serializers.JSONField(source="content_breakdown")
    strengths = serializers.ListField(child=serializers.CharField())
    weaknesses = serializers.ListField(child=serializers.CharField())
    recommendations = serializers.ListField(child=serializers.CharField())
    assignedProfessor = serializers.CharField(source="assigned_professor", allow_null=True)
    professorSubject = serializers.CharField(source="professor_subject", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)


class AnswerReviewSerializer(serializers.Serializer):
    questionId = serializers.IntegerField(source="question_id")
    header = serializers.CharField()
    alternatives = serializers.ListField(child=serializers.CharField())
    correctAnswer = serializers.IntegerField(source="correct_answer")
    selectedAnswer = serializers.IntegerField(source="selected_answer")
    isCorrect = serializers.BooleanField(source="is_correct")
    educationalIndicator = serializers.CharField(source="educational_indicator")
    professorName = serializers.CharField(source="professor_name")
    subject = serializers.CharField()
    timeSpent = serializers.IntegerField(source="time_spent", allow_null=True)


class ReportDetailSerializer(serializers.Serializer):
    """use_cases.exams.reports.ReportDetail"""

    report = ReportSerializer()
    examResult = ExamResultSerializer(source="result")
    answers = AnswerReviewSerializer(source="review", many=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        exam = instance.exam
        data["exam"] = (
            {"id": exam.id, "title": exam.title, "description": exam.description}
            if exam is not None
            else None
        )
        return data


class ReportCheckSerializer(serializers.Serializer):
    exists = serializers.BooleanField()
    reportId = serializers.IntegerField(source="report_id", allow_null=True)
    examResultId = serializers.IntegerField(source="exam_result_id")


class ReportListSerializer(serializers.ModelSerializer):
    """ORM ExamReport row for the student's paged report list."""

    examResultId = serializers.IntegerField(source="exam_result_id", read_only=True)
    examId = serializers.IntegerField(source="exam_result.exam_id", read_only=True)
    examTitle = serializers.CharField(source="exam_result.exam.title", read_only=True)
    percentage = serializers.IntegerField(source="exam_result.percentage", read_only=True)
    totalScore = serializers.IntegerField(source="exam_result.total_score", read_only=True)
    totalQuestions = serializers.IntegerField(source="exam_result.total_questions", read_only=True)
    completedAt = serializers.DateTimeField(source="exam_result.completed_at", read_only=True)
    contentBreakdown = serializers.JSONField(source="content_breakdown", read_only=True)
    assignedProfessor = serializers.CharField(source="assigned_professor", read_only=True)
    professorSubject = serializers.CharField(source="professor_subject", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = ExamReport
        fields = [
            "id",
            "examResultId",
            "examId",
            "examTitle",
            "percentage",
            "totalScore",
            "totalQuestions",
            "completedAt",
            "contentBreakdown",
            "strengths",
            "weaknesses",
            "recommendations",
            "assignedProfessor",
            "professorSubject",
            "createdAt",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


class SubjectAverageSerializer(serializers.Serializer):
    subject = serializers.CharField()
    averagePercentage = serializers.IntegerField(source="average_percentage")
    totalEvaluations = serializers.IntegerField(source="total_evaluations")


class LastExamSerializer(serializers.Serializer):
    resultId = serializers.IntegerField(source="result_id")
    title = serializers.CharField()
    score = serializers.IntegerField()
    completedAt = serializers.DateTimeField(source="completed_at", allow_null=True)
    strengths = serializers.ListField(child=serializers.CharField())
    weaknesses = serializers.ListField(child=serializers.CharField())
    recommendations = serializers.ListField(child=serializers.CharField())
    assignedProfessor = serializers.CharField(source="assigned_professor", allow_null=True)
    professorSubject = serializers.CharField(source="professor_subject", allow_null=True)


class MyReportStatsSerializer(serializers.Serializer):
    totalReports = serializers.IntegerField(source="total_reports")
    totalExams = serializers.IntegerField(source="total_exams")
    averageScore = serializers.IntegerField(source="average_score")
    bestScore = serializers.IntegerField(source="best_score")
    lastExamDate = serializers.DateTimeField(source="last_exam_date", allow_null=True)
    improvementTrend = serializers.CharField(source="improvement_trend")
    subjectPerformance = SubjectAverageSerializer(source="subject_performance", many=True)
    lastExam = LastExamSerializer(source="last_exam", allow_null=True)


class QuestionDifficultySerializer(serializers.Serializer):
    questionId = serializers.IntegerField(source="question_id")
    header = serializers.CharField()
    educationalIndicator = serializers.CharField(source="educational_indicator")
    subject = serializers.CharField()
    totalAnswers = serializers.IntegerField(source="total_answers")
    correctAnswers = serializers.IntegerField(source="correct_answers")
    correctRate = serializers.IntegerField(source="correct_rate")


class AdminOverviewSerializer(serializers.Serializer):
    totalExams = serializers.IntegerField(source="total_exams")
    totalResults = serializers.IntegerField(source="total_results")
    totalStudents = serializers.IntegerField(source="total_students")
    totalQuestions = serializers.IntegerField(source="total_questions")
    averagePercentage = serializers.IntegerField(source="average_percentage")


class AdminStatisticsSerializer(serializers.Serializer):
    overview = AdminOverviewSerializer()
    scoreDistribution = serializers.DictField(source="score_distribution", child=serializers.IntegerField())
    subjectPerformance = SubjectAverageSerializer(source="subject_performance", many=True)
    difficultQuestions = QuestionDifficultySerializer(source="difficult_questions", many=True)
    easiestQuestions = QuestionDifficultySerializer(source="easiest_questions", many=True)


class StudentSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)


class StudentResultEntrySerializer(serializers.Serializer):
    result = ExamResultSerializer()
    report = ReportSerializer(allow_null=True)


class StudentReportSerializer(serializers.Serializer):
    student = StudentSerializer()
    totalExams = serializers.IntegerField(source="total_exams")
    averageScore = serializers.IntegerField(source="average_score")
    trend = serializers.CharField()
    lastExamDate = serializers.DateTimeField(source="last_exam_date", allow_null=True)
    results = StudentResultEntrySerializer(many=True)
