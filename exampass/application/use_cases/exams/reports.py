"""
Report use cases: generate once per completed result, check, retrieve

Analytics are pure (domain.exams.reporting); this module only loads,
authorizes, refers and persists.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from exampass.application.ports.unit_of_work import UnitOfWork
from exampass.domain.exams.entities import AnswerReview, Exam, ExamReport, ExamResult
from exampass.domain.exams.errors import (
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)
from exampass.domain.exams.reporting import (
    STRENGTH_THRESHOLD,
    UNKNOWN_SUBJECT,
    WEAKNESS_THRESHOLD,
    draft_report,
    referral_line,
    weakest_subject,
)
from exampass.domain.shared.identity import Caller

logger = logging.getLogger(__name__)


@dataclass
class GeneratedReport:
    report: ExamReport
    result: ExamResult


@dataclass
class ReportDetail:
    report: ExamReport
    result: ExamResult
    exam: Optional[Exam]
    review: list[AnswerReview]


@dataclass(frozen=True)
class ReportCheck:
    exists: bool
    report_id: Optional[int]
    exam_result_id: int


def _load_visible_result(uow: UnitOfWork, result_id: int, caller: Caller) -> ExamResult:
    result = uow.results.get(result_id)
    if result is None:
        raise NotFoundError("Exam result not found.")
    if not caller.can_access(result.user_id):
        raise ForbiddenError("You do not have permission to access this report.")
    return result


def generate_report(
    uow: UnitOfWork,
    result_id: int,
    caller: Caller,
    strength_threshold: int = STRENGTH_THRESHOLD,
    weakness_threshold: int = WEAKNESS_THRESHOLD,
) -> GeneratedReport:
    """
    Build and persist the single report of a COMPLETED result.

    NotFound -> Forbidden (not owner, not admin) -> InvalidState (not completed)
    -> Conflict (report exists). When weaknesses exist, the professor teaching
    the weakest subject is added as a referral.
    """
    with uow:
        result = _load_visible_result(uow, result_id, caller)
        if not result.is_completed:
            raise InvalidStateError("Reports can only be generated for completed exams.")
        if uow.reports.get_for_result(result_id) is not None:
            raise ConflictError("A report already exists for this result.")

        draft = draft_report(
            uow.answers.list_graded(result_id),
            overall_percentage=result.percentage,
            strength_threshold=strength_threshold,
            weakness_threshold=weakness_threshold,
        )

        if draft.weaknesses:
            subject = weakest_subject(draft.subjects)
            professor = None
            if subject and subject != UNKNOWN_SUBJECT:
                professor = uow.professors.find_by_subject(subject)
            if professor is not None:
                draft = draft.with_referral(
                    professor_name=professor.name,
                    professor_subject=professor.subject,
                    line=referral_line(professor.name, professor.subject),
                )
                logger.info(
                    "report referral result=%s subject=%s professor=%s",
                    result_id, subject, professor.id,
                )

        report = uow.reports.create(result_id, draft)

    logger.info(
        "report generated result=%s report=%s strengths=%s weaknesses=%s",
        result_id, report.id, len(report.strengths), len(report.weaknesses),
    )
    return GeneratedReport(report=report, result=result)


def check_report(uow: UnitOfWork, result_id: int, caller: Caller) -> ReportCheck:
    with uow:
        _load_visible_result(uow, result_id, caller)
        report = uow.reports.get_for_result(result_id)
    return ReportCheck(
        exists=report is not None,
        report_id=report.id if report else None,
        exam_result_id=result_id,
    )


def get_report(uow: UnitOfWork, result_id: int, caller: Caller) -> ReportDetail:
    with uow:
        report = uow.reports.get_for_result(result_id)
        if report is None:
            raise NotFoundError("Report not found.")
        result = uow.results.get(result_id)
        if result is None:
            raise NotFoundError("Report not found.")
        if not caller.can_access(result.user_id):
            raise ForbiddenError("You do not have permission to view this report.")
        exam = uow.exams.get(result.exam_id)
        review = uow.answers.list_review(result_id)
    return ReportDetail(report=report, result=result, exam=exam, review=review)
