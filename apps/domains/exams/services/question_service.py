# PATH: apps/domains/exams/services/question_service.py
from __future__ import annotations

import logging

from django.db import transaction

from exampass.adapters.db.django import repositories_exams as exam_repo
from exampass.domain.exams.errors import InvalidStateError

from apps.domains.exams.models import Question

logger = logging.getLogger(__name__)


class QuestionService:
    """Answered questions stay; retire them with toggle instead of delete."""

    @staticmethod
    @transaction.atomic
    def create(*, serializer) -> Question:
        question = serializer.save()
        logger.info("question created id=%s professor=%s", question.pk, question.professor_id)
        return question

    @staticmethod
    @transaction.atomic
    def delete(*, question: Question) -> None:
        answers = exam_repo.question_answer_count(question.pk)
        if answers > 0:
            raise InvalidStateError(
                "The question cannot be deleted because it has been answered in exams.",
                details={"answersCount": answers},
            )
        if question.exam_links.exists():
            raise InvalidStateError("The question cannot be deleted because an exam uses it.")
        logger.info("question deleted id=%s", question.pk)
        question.delete()

    @staticmethod
    @transaction.atomic
    def toggle(*, question: Question) -> Question:
        question.is_active = not question.is_active
        question.save(update_fields=["is_active", "updated_at"])
        logger.info("question toggled id=%s active=%s", question.pk, question.is_active)
        return question
