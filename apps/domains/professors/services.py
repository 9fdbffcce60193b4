# PATH: apps/domains/professors/services.py
from __future__ import annotations

import logging

from django.db import IntegrityError, transaction

from exampass.adapters.db.django import repositories_professors as professor_repo
from exampass.domain.exams.errors import ConflictError, InvalidStateError

from .models import Professor

logger = logging.getLogger(__name__)


class ProfessorService:
    """
    Write rules:
    - (name, subject) unique -> Conflict
    - no delete while questions reference the professor
    """

    @staticmethod
    def _ensure_unique(*, name: str, subject: str, exclude_pk=None) -> None:
        if professor_repo.professor_exists_name_subject(name, subject, exclude_pk=exclude_pk):
            raise ConflictError("A professor with this name and subject already exists.")

    @staticmethod
    @transaction.atomic
    def create(*, serializer) -> Professor:
        data = serializer.validated_data
        ProfessorService._ensure_unique(name=data["name"], subject=data["subject"])
        try:
            with transaction.atomic():
                professor = serializer.save(status=Professor.Status.ACTIVE)
        except IntegrityError as exc:
            raise ConflictError("A professor with this name and subject already exists.") from exc
        logger.info("professor created id=%s subject=%s", professor.pk, professor.subject)
        return professor

    @staticmethod
    @transaction.atomic
    def update(*, serializer) -> Professor:
        instance = serializer.instance
        data = serializer.validated_data
        ProfessorService._ensure_unique(
            name=data.get("name", instance.name),
            subject=data.get("subject", instance.subject),
            exclude_pk=instance.pk,
        )
        try:
            with transaction.atomic():
                professor = serializer.save()
        except IntegrityError as exc:
            raise ConflictError("A professor with this name and subject already exists.") from exc
        logger.info("professor updated id=%s", professor.pk)
        return professor

    @staticmethod
    @transaction.atomic
    def delete(*, professor: Professor) -> None:
        count = professor_repo.professor_question_count(professor.pk)
        if count > 0:
            raise InvalidStateError(
                f"The professor cannot be deleted because {count} question(s) reference them.",
                details={"questionsCount": count},
            )
        logger.info("professor deleted id=%s", professor.pk)
        professor.delete()
