"""
Exam session use cases: start / resume / answer / submit (ports only, no Django)

State machine per (user, exam): none -> IN_PROGRESS -> COMPLETED (terminal).
Session state is re-read from the store on every call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from exampass.application.ports.unit_of_work import UnitOfWork
from exampass.domain.exams.entities import (
    ALTERNATIVES_PER_QUESTION,
    Exam,
    ExamAnswer,
    ExamReport,
    ExamResult,
    Question,
)
from exampass.domain.exams.errors import (
    ConflictError,
    DomainValidationError,
    InvalidStateError,
    NotFoundError,
)
from exampass.domain.exams.scoring import score_answers

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionStart:
    result: ExamResult
    exam: Exam
    questions: list[Question]
    resumed: bool = False


@dataclass
class SessionSnapshot:
    result: ExamResult
    exam: Exam
    questions: list[Question]
    elapsed_seconds: int
    # None when the exam has no time limit
    remaining_seconds: Optional[int]
    answers: dict[int, int] = field(default_factory=dict)


@dataclass
class RecentResult:
    result: ExamResult
    report: Optional[ExamReport] = None


def start_session(
    uow: UnitOfWork,
    exam_id: int,
    user_id: int,
    now: Optional[datetime] = None,
) -> SessionStart:
    """
    Start, or resume, the caller's attempt at an exam.

    NotFound (no exam) -> InvalidState (exam not ACTIVE) -> Conflict (already
    completed). An existing IN_PROGRESS attempt is returned unchanged.
    """
    now = now or _utcnow()
    with uow:
        exam = uow.exams.get(exam_id)
        if exam is None:
            raise NotFoundError("Exam not found.")
        if not exam.is_active():
            raise InvalidStateError("The exam is not available.")
        if uow.results.has_completed(user_id, exam_id):
            raise ConflictError("You have already completed this exam.")

        questions = uow.exams.list_questions(exam_id)
        existing = uow.results.find_in_progress(user_id, exam_id)
        if existing is not None:
            logger.info("exam session resumed result=%s exam=%s user=%s", existing.id, exam_id, user_id)
            return SessionStart(result=existing, exam=exam, questions=questions, resumed=True)

        result = uow.results.create_in_progress(
            user_id=user_id,
            exam_id=exam_id,
            total_questions=exam.total_questions,
            started_at=now,
        )
    logger.info("exam session started result=%s exam=%s user=%s", result.id, exam_id, user_id)
    return SessionStart(result=result, exam=exam, questions=questions, resumed=False)


def get_session(
    uow: UnitOfWork,
    exam_id: int,
    user_id: int,
    now: Optional[datetime] = None,
) -> SessionSnapshot:
    now = now or _utcnow()
    with uow:
        result = uow.results.find_in_progress(user_id, exam_id)
        if result is None:
            raise NotFoundError("No active session for this exam.")
        exam = uow.exams.get(exam_id)
        if exam is None:
            raise NotFoundError("Exam not found.")
        questions = uow.exams.list_questions(exam_id)
        answers = {a.question_id: a.selected_answer for a in uow.answers.list_for_result(result.id)}

    return SessionSnapshot(
        result=result,
        exam=exam,
        questions=questions,
        elapsed_seconds=result.elapsed_seconds(now),
        remaining_seconds=result.remaining_seconds(exam.time_limit_seconds, now),
        answers=answers,
    )


def record_answer(
    uow: UnitOfWork,
    result_id: int,
    user_id: int,
    question_id: int,
    selected_answer: int,
    time_spent: Optional[int] = None,
) -> ExamAnswer:
    """
    Persist one answer. Answering is idempotent-by-rejection: a second answer
    to the same question is a Conflict, never an overwrite. The result's score
    is left untouched until submit.
    """
    with uow:
        result = uow.results.get_in_progress_for_user(result_id, user_id)
        if result is None:
            raise NotFoundError("Exam session not found or already finished.")

        if not 0 <= int(selected_answer) < ALTERNATIVES_PER_QUESTION:
            raise DomainValidationError(
                f"selectedAnswer must be between 0 and {ALTERNATIVES_PER_QUESTION - 1}."
            )
        if time_spent is not None and int(time_spent) < 0:
            raise DomainValidationError("timeSpent cannot be negative.")

        question = uow.questions.get(question_id)
        if question is None or not uow.exams.contains_question(result.exam_id, question_id):
            raise NotFoundError("Question not found.")

        if uow.answers.find(result_id, question_id) is not None:
            raise ConflictError("This question has already been answered.")

        answer = uow.answers.create(
            result_id=result_id,
            question_id=question_id,
            selected_answer=int(selected_answer),
            is_correct=question.is_correct(selected_answer),
            time_spent=time_spent,
        )
    logger.info(
        "answer recorded result=%s question=%s correct=%s", result_id, question_id, answer.is_correct
    )
    return answer


def submit_session(
    uow: UnitOfWork,
    result_id: int,
    user_id: int,
    now: Optional[datetime] = None,
) -> ExamResult:
    """
    Score and close the attempt. The status flip is a conditional update: a
    second submit (or a concurrent one that lost) affects no row and fails
    with NotFound without rescoring.
    """
    now = now or _utcnow()
    with uow:
        result = uow.results.get_in_progress_for_user(result_id, user_id)
        if result is None:
            raise NotFoundError("Exam session not found or already finished.")

        score = score_answers(uow.answers.list_for_result(result_id), result.total_questions)
        if not uow.results.complete(
            result_id,
            total_score=score.correct,
            percentage=score.percentage,
            completed_at=now,
        ):
            raise NotFoundError("Exam session not found or already finished.")
        completed = uow.results.get(result_id)

    logger.info(
        "exam session submitted result=%s user=%s score=%s/%s (%s%%)",
        result_id, user_id, score.correct, score.total_questions, score.percentage,
    )
    return completed


def available_exam(uow: UnitOfWork, user_id: int) -> Optional[tuple[Exam, list[Question]]]:
    """The exam a student should take next, or None when every active exam is done."""
    with uow:
        exam = uow.exams.first_available_for(user_id)
        if exam is None:
            return None
        return exam, uow.exams.list_questions(exam.id)


def most_recent_result(uow: UnitOfWork, user_id: int) -> Optional[RecentResult]:
    """The caller's single most recent attempt, any status, with its report if any."""
    with uow:
        result = uow.results.latest_for_user(user_id)
        if result is None:
            return None
        return RecentResult(result=result, report=uow.reports.get_for_result(result.id))


def latest_completed_result(uow: UnitOfWork, exam_id: int, user_id: int) -> ExamResult:
    """The caller's latest COMPLETED attempt at one exam."""
    with uow:
        result = uow.results.latest_completed_for_exam(user_id, exam_id)
    if result is None:
        raise NotFoundError("No completed result for this exam.")
    return result
