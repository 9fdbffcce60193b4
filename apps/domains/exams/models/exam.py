from django.db import models
from apps.api.common.models import BaseModel


class Exam(BaseModel):
    """
    Exam definition. total_questions is fixed when the exam is generated and
    is not recomputed from the question links afterwards.
    """

    class Status(models.TextChoices):
        DRAFT = "DRAFT", "Draft"
        ACTIVE = "ACTIVE", "Active"
        INACTIVE = "INACTIVE", "Inactive"

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )

    # minutes; null = unlimited
    time_limit = models.PositiveIntegerField(null=True, blank=True)

    total_questions = models.PositiveIntegerField(default=0)

    questions = models.ManyToManyField(
        "exams.Question",
        through="exams.ExamQuestion",
        related_name="exams",
    )

    class Meta:
        db_table = "exams_exam"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.title


class ExamQuestion(models.Model):
    """Question slot inside an exam (order 1..n)."""

    exam = models.ForeignKey(
        Exam,
        on_delete=models.CASCADE,
        related_name="exam_questions",
    )
    question = models.ForeignKey(
        "exams.Question",
        on_delete=models.PROTECT,
        related_name="exam_links",
    )
    order = models.PositiveIntegerField()

    class Meta:
        db_table = "exams_exam_question"
        ordering = ["order"]
        constraints = [
            models.UniqueConstraint(fields=["exam", "question"], name="exams_exam_question_uniq"),
            models.UniqueConstraint(fields=["exam", "order"], name="exams_exam_order_uniq"),
        ]

    def __str__(self):
        return f"{self.exam_id} Q{self.order}"
