from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q

from apps.api.common.models import BaseModel


class ExamResult(BaseModel):
    """
    One attempt of one student at one exam.

    - at most one IN_PROGRESS row per (user, exam)
    - at most one COMPLETED row per (user, exam)
    - IN_PROGRESS -> COMPLETED happens once, via a conditional update
    """

    class Status(models.TextChoices):
        IN_PROGRESS = "IN_PROGRESS", "In progress"
        COMPLETED = "COMPLETED", "Completed"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="exam_results",
    )
    exam = models.ForeignKey(
        "exams.Exam",
        on_delete=models.CASCADE,
        related_name="results",
    )

    status = models.CharField(
        max_length=12,
        choices=Status.choices,
        default=Status.IN_PROGRESS,
        db_index=True,
    )

    started_at = models.DateTimeField()
    completed_at = models.DateTimeField(null=True, blank=True)

    # snapshot of exam.total_questions at start
    total_questions = models.PositiveIntegerField(default=0)
    total_score = models.PositiveIntegerField(default=0)
    percentage = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "results_exam_result"
        ordering = ["-started_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "exam"],
                condition=Q(status="IN_PROGRESS"),
                name="results_one_in_progress_per_exam",
            ),
            models.UniqueConstraint(
                fields=["user", "exam"],
                condition=Q(status="COMPLETED"),
                name="results_one_completed_per_exam",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "status", "completed_at"], name="results_user_status_done_idx"),
        ]

    def __str__(self):
        return f"ExamResult#{self.pk} user={self.user_id} exam={self.exam_id} {self.status}"
