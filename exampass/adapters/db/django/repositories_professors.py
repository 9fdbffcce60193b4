"""
Professors: DB access kept inside the adapters. ORM imports are lazy.
"""
from __future__ import annotations

from typing import Optional

from exampass.domain.exams.entities import Professor


def professor_all():
    """ViewSet get_queryset: question count annotated."""
    from django.db.models import Count
    from apps.domains.professors.models import Professor as ProfessorModel
    return ProfessorModel.objects.annotate(questions_count=Count("questions"))


def professor_exists(pk) -> bool:
    from apps.domains.professors.models import Professor as ProfessorModel
    return ProfessorModel.objects.filter(pk=pk).exists()


def professor_exists_name_subject(name: str, subject: str, exclude_pk=None) -> bool:
    from apps.domains.professors.models import Professor as ProfessorModel
    qs = ProfessorModel.objects.filter(name__iexact=name, subject__iexact=subject)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    return qs.exists()


def professor_filter_subject(subject: str):
    """Case-insensitive containment, by name."""
    return professor_all().filter(subject__icontains=(subject or "").strip()).order_by("name", "id")


def professor_question_count(pk) -> int:
    from apps.domains.exams.models import Question
    return Question.objects.filter(professor_id=pk).count()


# ---------------------------------------------------------------------------
# ProfessorRepository (port)
# ---------------------------------------------------------------------------


def _model_to_entity(m) -> Optional[Professor]:
    if m is None:
        return None
    return Professor(
        id=int(m.pk),
        name=m.name,
        subject=m.subject,
        email=m.email,
        phone=m.phone,
        bio=m.bio or "",
        status=m.status,
    )


class DjangoProfessorRepository:
    def find_by_subject(self, subject: str) -> Optional[Professor]:
        from apps.domains.professors.models import Professor as ProfessorModel
        raw = (subject or "").strip()
        if not raw:
            return None
        m = ProfessorModel.objects.filter(subject__icontains=raw).order_by("id").first()
        return _model_to_entity(m)
