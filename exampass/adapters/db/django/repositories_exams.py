"""
Exams / Questions: DB access kept inside the adapters. ORM imports are lazy.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from exampass.domain.exams.entities import Exam, ExamStatus, Question, QuestionAnswerStats


# ---------------------------------------------------------------------------
# Questions (views / services)
# ---------------------------------------------------------------------------


def question_all():
    from apps.domains.exams.models import Question as QuestionModel
    return QuestionModel.objects.select_related("professor")


def question_filter_active_ids(ids: Iterable[int]):
    from apps.domains.exams.models import Question as QuestionModel
    return QuestionModel.objects.filter(id__in=list(ids), is_active=True)


def question_answer_count(pk) -> int:
    from apps.domains.results.models import ExamAnswer
    return ExamAnswer.objects.filter(question_id=pk).count()


def question_indicators() -> list[str]:
    from apps.domains.exams.models import Question as QuestionModel
    values = (
        QuestionModel.objects.exclude(educational_indicator="")
        .order_by("educational_indicator")
        .values_list("educational_indicator", flat=True)
        .distinct()
    )
    return list(values)


# ---------------------------------------------------------------------------
# Exams (views / services)
# ---------------------------------------------------------------------------


def exam_all_with_counts():
    from django.db.models import Count
    from apps.domains.exams.models import Exam as ExamModel
    return ExamModel.objects.annotate(
        results_count=Count("results", distinct=True),
        questions_count=Count("exam_questions", distinct=True),
    )


def exam_get(pk) -> Optional[Any]:
    from apps.domains.exams.models import Exam as ExamModel
    return ExamModel.objects.filter(pk=pk).first()


def exam_links_ordered(exam_id):
    from apps.domains.exams.models import ExamQuestion
    return (
        ExamQuestion.objects.filter(exam_id=exam_id)
        .select_related("question", "question__professor")
        .order_by("order")
    )


def exam_first_available_for(user_id):
    """Oldest ACTIVE exam the user has not COMPLETED."""
    from apps.domains.exams.models import Exam as ExamModel
    from apps.domains.results.models import ExamResult
    completed = ExamResult.objects.filter(
        user_id=user_id, status=ExamResult.Status.COMPLETED
    ).values("exam_id")
    return (
        ExamModel.objects.filter(status=ExamModel.Status.ACTIVE)
        .exclude(id__in=completed)
        .order_by("created_at", "id")
        .first()
    )


def exam_create_with_questions(*, title, description, status, time_limit, question_ids):
    from apps.domains.exams.models import Exam as ExamModel, ExamQuestion
    exam = ExamModel.objects.create(
        title=title,
        description=description,
        status=status,
        time_limit=time_limit,
        total_questions=len(question_ids),
    )
    ExamQuestion.objects.bulk_create(
        [
            ExamQuestion(exam=exam, question_id=qid, order=index)
            for index, qid in enumerate(question_ids, start=1)
        ]
    )
    return exam


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------


def _question_to_entity(m, order: Optional[int] = None) -> Optional[Question]:
    if m is None:
        return None
    professor = getattr(m, "professor", None)
    return Question(
        id=int(m.pk),
        header=m.header,
        alternatives=list(m.alternatives or []),
        correct_answer=int(m.correct_answer),
        educational_indicator=m.educational_indicator or "",
        is_active=bool(m.is_active),
        professor_id=m.professor_id,
        professor_name=professor.name if professor else "",
        subject=professor.subject if professor else "",
        order=order,
    )


def _exam_to_entity(m) -> Optional[Exam]:
    if m is None:
        return None
    return Exam(
        id=int(m.pk),
        title=m.title,
        description=m.description or "",
        status=ExamStatus(m.status),
        time_limit=m.time_limit,
        total_questions=int(m.total_questions or 0),
        created_at=m.created_at,
    )


class DjangoExamRepository:
    def get(self, exam_id: int) -> Optional[Exam]:
        return _exam_to_entity(exam_get(exam_id))

    def list_questions(self, exam_id: int) -> list[Question]:
        return [_question_to_entity(link.question, order=link.order) for link in exam_links_ordered(exam_id)]

    def contains_question(self, exam_id: int, question_id: int) -> bool:
        from apps.domains.exams.models import ExamQuestion
        return ExamQuestion.objects.filter(exam_id=exam_id, question_id=question_id).exists()

    def first_available_for(self, user_id: int) -> Optional[Exam]:
        return _exam_to_entity(exam_first_available_for(user_id))

    def count(self) -> int:
        from apps.domains.exams.models import Exam as ExamModel
        return ExamModel.objects.count()


class DjangoQuestionRepository:
    def get(self, question_id: int) -> Optional[Question]:
        return _question_to_entity(question_all().filter(pk=question_id).first())

    def count_active(self) -> int:
        from apps.domains.exams.models import Question as QuestionModel
        return QuestionModel.objects.filter(is_active=True).count()

    def answer_stats(self) -> list[QuestionAnswerStats]:
        """One grouped query over exam answers, joined with question tags."""
        from django.db.models import Count, Q
        from apps.domains.results.models import ExamAnswer
        rows = (
            ExamAnswer.objects.values(
                "question_id",
                "question__header",
                "question__educational_indicator",
                "question__professor__subject",
            )
            .annotate(
                total=Count("id"),
                correct=Count("id", filter=Q(is_correct=True)),
            )
            .order_by("question_id")
        )
        return [
            QuestionAnswerStats(
                question_id=int(r["question_id"]),
                header=r["question__header"] or "",
                educational_indicator=r["question__educational_indicator"] or "",
                subject=r["question__professor__subject"] or "",
                total_answers=int(r["total"]),
                correct_answers=int(r["correct"]),
            )
            for r in rows
        ]
