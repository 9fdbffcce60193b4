from django.contrib import admin

from .models import Exam, ExamQuestion, Question


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "header", "educational_indicator", "professor", "correct_answer", "is_active", "created_at")
    search_fields = ("header", "educational_indicator")
    list_filter = ("is_active", "professor__subject")


class ExamQuestionInline(admin.TabularInline):
    model = ExamQuestion
    extra = 0
    raw_id_fields = ("question",)


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "status", "total_questions", "time_limit", "created_at")
    search_fields = ("title",)
    list_filter = ("status",)
    inlines = [ExamQuestionInline]
