# PATH: apps/domains/exams/services/exam_factory.py
from __future__ import annotations

import logging
from typing import Optional

from django.db import transaction

from exampass.adapters.db.django import repositories_exams as exam_repo
from exampass.domain.exams.errors import DomainValidationError, NotFoundError

from apps.domains.exams.models import Exam

logger = logging.getLogger(__name__)


class ExamFactory:
    """
    Builds an exam from hand-picked questions.

    - every question must exist and be ACTIVE
    - ExamQuestion.order follows the given id order (1..n)
    - total_questions is fixed here and never recomputed
    """

    @staticmethod
    @transaction.atomic
    def generate(
        *,
        title: str,
        question_ids: list[int],
        description: str = "",
        status: str = Exam.Status.DRAFT,
        time_limit: Optional[int] = None,
    ) -> Exam:
        found = set(
            exam_repo.question_filter_active_ids(question_ids).values_list("id", flat=True)
        )
        invalid_ids = [qid for qid in question_ids if qid not in found]
        if invalid_ids:
            raise DomainValidationError(
                "Some questions do not exist or are not active.",
                details={
                    "requested": len(question_ids),
                    "found": len(found),
                    "invalidIds": invalid_ids,
                },
            )

        exam = exam_repo.exam_create_with_questions(
            title=title,
            description=description or "",
            status=status,
            time_limit=time_limit or None,
            question_ids=list(question_ids),
        )
        logger.info(
            "exam generated id=%s questions=%s status=%s time_limit=%s",
            exam.pk, exam.total_questions, exam.status, exam.time_limit,
        )
        return exam

    @staticmethod
    @transaction.atomic
    def set_status(*, exam_id: int, status: str) -> Exam:
        exam = exam_repo.exam_get(exam_id)
        if exam is None:
            raise NotFoundError("Exam not found.")
        exam.status = status
        exam.save(update_fields=["status", "updated_at"])
        logger.info("exam status changed id=%s status=%s", exam.pk, status)
        return exam
