from django.db import models


class ExamAnswer(models.Model):
    """Graded answer. Written once per (result, question), never updated."""

    exam_result = models.ForeignKey(
        "results.ExamResult",
        on_delete=models.CASCADE,
        related_name="answers",
    )
    question = models.ForeignKey(
        "exams.Question",
        on_delete=models.PROTECT,
        related_name="answers",
    )

    selected_answer = models.PositiveSmallIntegerField()
    is_correct = models.BooleanField(default=False)
    # seconds, as reported by the client
    time_spent = models.PositiveIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "results_exam_answer"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["exam_result", "question"],
                name="results_one_answer_per_question",
            ),
        ]

    def __str__(self) -> str:
        return f"Result#{self.exam_result_id} Q{self.question_id}"
