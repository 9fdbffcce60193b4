"""
Statistics use cases: student dashboard, admin overview, admin per-student report

Every aggregate is read inside one unit of work; a failing sub-query aborts
the whole call instead of returning partial numbers.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from exampass.application.ports.unit_of_work import UnitOfWork
from exampass.domain.exams.entities import ExamReport, ExamResult, QuestionAnswerStats, Student
from exampass.domain.exams.errors import ForbiddenError, NotFoundError
from exampass.domain.exams.statistics import (
    EASIEST_SLICE,
    HARDEST_SLICE,
    SubjectAverage,
    hardest_and_easiest,
    rank_by_difficulty,
    score_distribution,
    subject_averages,
    trend_of,
)
from exampass.domain.shared.identity import Caller
from exampass.domain.shared.rounding import average

logger = logging.getLogger(__name__)


# =========================
# Student-facing
# =========================

@dataclass
class LastExamSnapshot:
    result_id: int
    title: str
    score: int
    completed_at: Optional[datetime]
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    assigned_professor: Optional[str] = None
    professor_subject: Optional[str] = None


@dataclass
class MyReportStats:
    total_reports: int
    total_exams: int
    average_score: int
    best_score: int
    last_exam_date: Optional[datetime]
    improvement_trend: str
    subject_performance: list[SubjectAverage]
    last_exam: Optional[LastExamSnapshot] = None


def my_report_stats(uow: UnitOfWork, user_id: int) -> MyReportStats:
    with uow:
        results = uow.results.list_completed_for_user(user_id)
        reports = uow.reports.list_for_user(user_id)

    percentages = [r.percentage for r in results]
    last_exam: Optional[LastExamSnapshot] = None
    if results:
        latest = results[0]
        report = next((rep for rep in reports if rep.exam_result_id == latest.id), None)
        last_exam = LastExamSnapshot(
            result_id=latest.id,
            title=latest.exam_title,
            score=latest.percentage,
            completed_at=latest.completed_at,
        )
        if report is not None:
            last_exam.strengths = list(report.strengths)
            last_exam.weaknesses = list(report.weaknesses)
            last_exam.recommendations = list(report.recommendations)
            last_exam.assigned_professor = report.assigned_professor
            last_exam.professor_subject = report.professor_subject

    return MyReportStats(
        total_reports=len(reports),
        total_exams=len(results),
        average_score=average(percentages),
        best_score=max(percentages) if percentages else 0,
        last_exam_date=results[0].completed_at if results else None,
        improvement_trend=trend_of(percentages),
        subject_performance=subject_averages(rep.subjects for rep in reports),
        last_exam=last_exam,
    )


# =========================
# Admin-facing
# =========================

@dataclass
class AdminOverview:
    total_exams: int
    total_results: int
    total_students: int
    total_questions: int
    average_percentage: int


@dataclass
class AdminStatistics:
    overview: AdminOverview
    score_distribution: dict[str, int]
    subject_performance: list[SubjectAverage]
    difficult_questions: list[QuestionAnswerStats]
    easiest_questions: list[QuestionAnswerStats]


def admin_statistics(
    uow: UnitOfWork,
    caller: Caller,
    hardest: int = HARDEST_SLICE,
    easiest: int = EASIEST_SLICE,
) -> AdminStatistics:
    if not caller.is_admin:
        raise ForbiddenError("Administrator access required.")

    with uow:
        total_exams = uow.exams.count()
        total_results = uow.results.count_completed()
        total_students = uow.users.count_students()
        total_questions = uow.questions.count_active()
        percentages = uow.results.completed_percentages()
        stats = uow.questions.answer_stats()
        breakdowns = uow.reports.all_subject_breakdowns()

    difficult, easiest_rows = hardest_and_easiest(rank_by_difficulty(stats), hardest, easiest)
    logger.info(
        "admin statistics computed results=%s answered_questions=%s", total_results, len(stats)
    )
    return AdminStatistics(
        overview=AdminOverview(
            total_exams=total_exams,
            total_results=total_results,
            total_students=total_students,
            total_questions=total_questions,
            average_percentage=average(percentages),
        ),
        score_distribution=score_distribution(percentages),
        subject_performance=subject_averages(breakdowns),
        difficult_questions=difficult,
        easiest_questions=easiest_rows,
    )


@dataclass
class StudentResultEntry:
    result: ExamResult
    report: Optional[ExamReport]


@dataclass
class StudentReport:
    student: Student
    total_exams: int
    average_score: int
    trend: str
    last_exam_date: Optional[datetime]
    results: list[StudentResultEntry]


def student_report(uow: UnitOfWork, user_id: int, caller: Caller) -> StudentReport:
    if not caller.is_admin:
        raise ForbiddenError("Administrator access required.")

    with uow:
        student = uow.users.get_student(user_id)
        if student is None:
            raise NotFoundError("Student not found.")
        results = uow.results.list_completed_for_user(user_id)
        reports = {rep.exam_result_id: rep for rep in uow.reports.list_for_user(user_id)}

    percentages = [r.percentage for r in results]
    return StudentReport(
        student=student,
        total_exams=len(results),
        average_score=average(percentages),
        trend=trend_of(percentages),
        last_exam_date=results[0].completed_at if results else None,
        results=[StudentResultEntry(result=r, report=reports.get(r.id)) for r in results],
    )
