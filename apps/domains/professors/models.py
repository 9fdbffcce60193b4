from django.db import models
from apps.api.common.models import TimestampModel


class Professor(TimestampModel):
    """
    Subject professor. Questions point at a professor; reports refer
    students to the professor of their weakest subject.
    """

    class Status(models.TextChoices):
        ACTIVE = "ACTIVE", "Active"
        INACTIVE = "INACTIVE", "Inactive"

    name = models.CharField(max_length=100)
    subject = models.CharField(max_length=100, db_index=True)

    email = models.EmailField(null=True, blank=True)
    phone = models.CharField(max_length=20, null=True, blank=True)
    bio = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE,
    )

    class Meta:
        db_table = "professors_professor"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["name", "subject"],
                name="professors_professor_name_subject_uniq",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.subject})"
