from django.db import models
from apps.api.common.models import BaseModel


class Question(BaseModel):
    """
    Multiple-choice question: exactly 4 alternatives, correct_answer is the
    0-based index of the right one.
    """

    header = models.TextField()
    alternatives = models.JSONField(default=list)
    correct_answer = models.PositiveSmallIntegerField()

    # free-text topic tag; reports group answers by it
    educational_indicator = models.CharField(max_length=255, db_index=True)

    is_active = models.BooleanField(default=True)

    professor = models.ForeignKey(
        "professors.Professor",
        on_delete=models.PROTECT,
        related_name="questions",
    )

    class Meta:
        db_table = "exams_question"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return (self.header or "")[:60]
