from django.contrib import admin

from .models import ExamAnswer, ExamReport, ExamResult


class ExamAnswerInline(admin.TabularInline):
    model = ExamAnswer
    extra = 0
    raw_id_fields = ("question",)
    readonly_fields = ("selected_answer", "is_correct", "time_spent", "created_at")


@admin.register(ExamResult)
class ExamResultAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "exam", "status", "total_score", "total_questions", "percentage", "started_at", "completed_at")
    list_filter = ("status",)
    search_fields = ("user__email", "exam__title")
    raw_id_fields = ("user", "exam")
    inlines = [ExamAnswerInline]


@admin.register(ExamReport)
class ExamReportAdmin(admin.ModelAdmin):
    list_display = ("id", "exam_result", "assigned_professor", "professor_subject", "created_at")
    search_fields = ("exam_result__exam__title", "exam_result__user__email")
    raw_id_fields = ("exam_result",)
