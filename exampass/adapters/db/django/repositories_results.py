"""
Results / Answers / Reports: DB access kept inside the adapters. ORM imports are lazy.

Uniqueness races are caught inside a savepoint so the outer transaction
stays usable, and re-raised as ConflictError.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from exampass.domain.exams.entities import (
    AnswerReview,
    ExamAnswer,
    ExamReport,
    ExamResult,
    GradedAnswer,
    ReportDraft,
    ResultStatus,
)
from exampass.domain.exams.errors import ConflictError


# ---------------------------------------------------------------------------
# Views (querysets)
# ---------------------------------------------------------------------------


def result_filter_user(user_id):
    """Profile list: every attempt of the user, newest first."""
    from apps.domains.results.models import ExamResult as ResultModel
    return (
        ResultModel.objects.filter(user_id=user_id)
        .select_related("exam")
        .order_by("-started_at", "-id")
    )


def report_filter_user(user_id):
    """Reports of the user's completed results, newest first."""
    from apps.domains.results.models import ExamReport as ReportModel
    return (
        ReportModel.objects.filter(exam_result__user_id=user_id)
        .select_related("exam_result", "exam_result__exam")
        .order_by("-created_at", "-id")
    )


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------


def _result_to_entity(m) -> Optional[ExamResult]:
    if m is None:
        return None
    exam = getattr(m, "exam", None)
    return ExamResult(
        id=int(m.pk),
        user_id=int(m.user_id),
        exam_id=int(m.exam_id),
        status=ResultStatus(m.status),
        started_at=m.started_at,
        total_questions=int(m.total_questions or 0),
        total_score=int(m.total_score or 0),
        percentage=int(m.percentage or 0),
        completed_at=m.completed_at,
        exam_title=exam.title if exam is not None else "",
    )


def _answer_to_entity(m) -> ExamAnswer:
    return ExamAnswer(
        id=int(m.pk),
        exam_result_id=int(m.exam_result_id),
        question_id=int(m.question_id),
        selected_answer=int(m.selected_answer),
        is_correct=bool(m.is_correct),
        time_spent=m.time_spent,
        created_at=m.created_at,
    )


def _report_to_entity(m) -> Optional[ExamReport]:
    if m is None:
        return None
    breakdown = m.content_breakdown or {}
    return ExamReport(
        id=int(m.pk),
        exam_result_id=int(m.exam_result_id),
        indicators=dict(breakdown.get("indicators") or {}),
        subjects=dict(breakdown.get("subjects") or {}),
        strengths=list(m.strengths or []),
        weaknesses=list(m.weaknesses or []),
        recommendations=list(m.recommendations or []),
        assigned_professor=m.assigned_professor,
        professor_subject=m.professor_subject,
        created_at=m.created_at,
    )


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------


class DjangoExamResultRepository:
    def _qs(self):
        from apps.domains.results.models import ExamResult as ResultModel
        return ResultModel.objects.select_related("exam")

    def get(self, result_id: int) -> Optional[ExamResult]:
        return _result_to_entity(self._qs().filter(pk=result_id).first())

    def find_in_progress(self, user_id: int, exam_id: int) -> Optional[ExamResult]:
        m = self._qs().filter(
            user_id=user_id, exam_id=exam_id, status=ResultStatus.IN_PROGRESS.value
        ).first()
        return _result_to_entity(m)

    def get_in_progress_for_user(self, result_id: int, user_id: int) -> Optional[ExamResult]:
        m = self._qs().filter(
            pk=result_id, user_id=user_id, status=ResultStatus.IN_PROGRESS.value
        ).first()
        return _result_to_entity(m)

    def has_completed(self, user_id: int, exam_id: int) -> bool:
        return self._qs().filter(
            user_id=user_id, exam_id=exam_id, status=ResultStatus.COMPLETED.value
        ).exists()

    def create_in_progress(
        self, user_id: int, exam_id: int, total_questions: int, started_at: datetime
    ) -> ExamResult:
        from django.db import IntegrityError, transaction
        from apps.domains.results.models import ExamResult as ResultModel
        try:
            with transaction.atomic():
                m = ResultModel.objects.create(
                    user_id=user_id,
                    exam_id=exam_id,
                    status=ResultStatus.IN_PROGRESS.value,
                    total_questions=total_questions,
                    started_at=started_at,
                )
        except IntegrityError as e:
            raise ConflictError("An exam session is already in progress.") from e
        return self.get(m.pk)

    def complete(
        self, result_id: int, total_score: int, percentage: int, completed_at: datetime
    ) -> bool:
        from django.db import IntegrityError, transaction
        from apps.domains.results.models import ExamResult as ResultModel
        try:
            with transaction.atomic():
                rows = ResultModel.objects.filter(
                    pk=result_id, status=ResultStatus.IN_PROGRESS.value
                ).update(
                    status=ResultStatus.COMPLETED.value,
                    total_score=total_score,
                    percentage=percentage,
                    completed_at=completed_at,
                    updated_at=completed_at,
                )
        except IntegrityError as e:
            raise ConflictError("You have already completed this exam.") from e
        return rows == 1

    def _completed_for_user(self, user_id: int):
        return self._qs().filter(
            user_id=user_id, status=ResultStatus.COMPLETED.value
        ).order_by("-completed_at", "-id")

    def list_completed_for_user(self, user_id: int) -> list[ExamResult]:
        return [_result_to_entity(m) for m in self._completed_for_user(user_id)]

    def latest_for_user(self, user_id: int) -> Optional[ExamResult]:
        m = self._qs().filter(user_id=user_id).order_by("-started_at", "-id").first()
        return _result_to_entity(m)

    def latest_completed_for_exam(self, user_id: int, exam_id: int) -> Optional[ExamResult]:
        return _result_to_entity(self._completed_for_user(user_id).filter(exam_id=exam_id).first())

    def count_completed(self) -> int:
        return self._qs().filter(status=ResultStatus.COMPLETED.value).count()

    def completed_percentages(self) -> list[int]:
        values = self._qs().filter(status=ResultStatus.COMPLETED.value).values_list("percentage", flat=True)
        return [int(v or 0) for v in values]


class DjangoExamAnswerRepository:
    def _qs(self):
        from apps.domains.results.models import ExamAnswer as AnswerModel
        return AnswerModel.objects.all()

    def find(self, result_id: int, question_id: int) -> Optional[ExamAnswer]:
        m = self._qs().filter(exam_result_id=result_id, question_id=question_id).first()
        return _answer_to_entity(m) if m is not None else None

    def create(
        self,
        result_id: int,
        question_id: int,
        selected_answer: int,
        is_correct: bool,
        time_spent: Optional[int],
    ) -> ExamAnswer:
        from django.db import IntegrityError, transaction
        from apps.domains.results.models import ExamAnswer as AnswerModel
        try:
            with transaction.atomic():
                m = AnswerModel.objects.create(
                    exam_result_id=result_id,
                    question_id=question_id,
                    selected_answer=selected_answer,
                    is_correct=is_correct,
                    time_spent=time_spent,
                )
        except IntegrityError as e:
            raise ConflictError("This question has already been answered.") from e
        return _answer_to_entity(m)

    def list_for_result(self, result_id: int) -> list[ExamAnswer]:
        qs = self._qs().filter(exam_result_id=result_id).order_by("created_at", "id")
        return [_answer_to_entity(m) for m in qs]

    def list_graded(self, result_id: int) -> list[GradedAnswer]:
        rows = (
            self._qs()
            .filter(exam_result_id=result_id)
            .order_by("created_at", "id")
            .values(
                "question_id",
                "is_correct",
                "question__educational_indicator",
                "question__professor__subject",
            )
        )
        return [
            GradedAnswer(
                question_id=int(r["question_id"]),
                is_correct=bool(r["is_correct"]),
                educational_indicator=r["question__educational_indicator"] or "",
                subject=r["question__professor__subject"] or "",
            )
            for r in rows
        ]

    def list_review(self, result_id: int) -> list[AnswerReview]:
        qs = (
            self._qs()
            .filter(exam_result_id=result_id)
            .select_related("question", "question__professor")
            .order_by("created_at", "id")
        )
        out: list[AnswerReview] = []
        for m in qs:
            q = m.question
            professor = q.professor
            out.append(
                AnswerReview(
                    question_id=int(q.pk),
                    header=q.header,
                    alternatives=list(q.alternatives or []),
                    correct_answer=int(q.correct_answer),
                    selected_answer=int(m.selected_answer),
                    is_correct=bool(m.is_correct),
                    educational_indicator=q.educational_indicator or "",
                    professor_name=professor.name if professor else "",
                    subject=professor.subject if professor else "",
                    time_spent=m.time_spent,
                )
            )
        return out


class DjangoExamReportRepository:
    def get_for_result(self, result_id: int) -> Optional[ExamReport]:
        from apps.domains.results.models import ExamReport as ReportModel
        return _report_to_entity(ReportModel.objects.filter(exam_result_id=result_id).first())

    def create(self, result_id: int, draft: ReportDraft) -> ExamReport:
        from django.db import IntegrityError, transaction
        from apps.domains.results.models import ExamReport as ReportModel
        try:
            with transaction.atomic():
                m = ReportModel.objects.create(
                    exam_result_id=result_id,
                    content_breakdown={
                        "indicators": dict(draft.indicators),
                        "subjects": dict(draft.subjects),
                    },
                    strengths=list(draft.strengths),
                    weaknesses=list(draft.weaknesses),
                    recommendations=list(draft.recommendations),
                    assigned_professor=draft.assigned_professor,
                    professor_subject=draft.professor_subject,
                )
        except IntegrityError as e:
            raise ConflictError("A report already exists for this result.") from e
        return _report_to_entity(m)

    def list_for_user(self, user_id: int) -> list[ExamReport]:
        return [_report_to_entity(m) for m in report_filter_user(user_id)]

    def all_subject_breakdowns(self) -> list[dict[str, int]]:
        from apps.domains.results.models import ExamReport as ReportModel
        values: list[Any] = ReportModel.objects.values_list("content_breakdown", flat=True)
        return [dict((b or {}).get("subjects") or {}) for b in values]
