from django.db import models


class ExamReport(models.Model):
    """
    Performance report of a COMPLETED result (at most one).

    content_breakdown = {"indicators": {name: pct}, "subjects": {name: pct}}
    """

    exam_result = models.OneToOneField(
        "results.ExamResult",
        on_delete=models.CASCADE,
        related_name="report",
    )

    content_breakdown = models.JSONField(default=dict)
    strengths = models.JSONField(default=list)
    weaknesses = models.JSONField(default=list)
    recommendations = models.JSONField(default=list)

    assigned_professor = models.CharField(max_length=255, null=True, blank=True)
    professor_subject = models.CharField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "results_exam_report"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Report for result#{self.exam_result_id}"
