"""
Repository ports (no Django/ORM)

Uniqueness races surface as ConflictError from the adapters; conditional
updates report whether a row was affected.
"""
from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import Optional, Protocol

from exampass.domain.exams.entities import (
    AnswerReview,
    Exam,
    ExamAnswer,
    ExamReport,
    ExamResult,
    GradedAnswer,
    Professor,
    Question,
    QuestionAnswerStats,
    ReportDraft,
    Student,
)


class ExamRepository(Protocol):
    @abstractmethod
    def get(self, exam_id: int) -> Optional[Exam]:
        ...

    @abstractmethod
    def list_questions(self, exam_id: int) -> list[Question]:
        """Exam questions in exam order (order 1..n)."""
        ...

    @abstractmethod
    def contains_question(self, exam_id: int, question_id: int) -> bool:
        ...

    @abstractmethod
    def first_available_for(self, user_id: int) -> Optional[Exam]:
        """Oldest ACTIVE exam the user has not completed."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...


class QuestionRepository(Protocol):
    @abstractmethod
    def get(self, question_id: int) -> Optional[Question]:
        ...

    @abstractmethod
    def count_active(self) -> int:
        ...

    @abstractmethod
    def answer_stats(self) -> list[QuestionAnswerStats]:
        """Grouped aggregate over every answer ever given, one row per answered question."""
        ...


class ProfessorRepository(Protocol):
    @abstractmethod
    def find_by_subject(self, subject: str) -> Optional[Professor]:
        """First professor whose subject contains `subject`, case-insensitive."""
        ...


class ExamResultRepository(Protocol):
    @abstractmethod
    def get(self, result_id: int) -> Optional[ExamResult]:
        ...

    @abstractmethod
    def find_in_progress(self, user_id: int, exam_id: int) -> Optional[ExamResult]:
        ...

    @abstractmethod
    def get_in_progress_for_user(self, result_id: int, user_id: int) -> Optional[ExamResult]:
        ...

    @abstractmethod
    def has_completed(self, user_id: int, exam_id: int) -> bool:
        ...

    @abstractmethod
    def create_in_progress(
        self, user_id: int, exam_id: int, total_questions: int, started_at: datetime
    ) -> ExamResult:
        """Raises ConflictError if another IN_PROGRESS row won the race."""
        ...

    @abstractmethod
    def complete(
        self, result_id: int, total_score: int, percentage: int, completed_at: datetime
    ) -> bool:
        """IN_PROGRESS -> COMPLETED only if still IN_PROGRESS. False when no row changed."""
        ...

    @abstractmethod
    def list_completed_for_user(self, user_id: int) -> list[ExamResult]:
        """Newest completion first."""
        ...

    @abstractmethod
    def latest_for_user(self, user_id: int) -> Optional[ExamResult]:
        """Most recently started result, any status."""
        ...

    @abstractmethod
    def latest_completed_for_exam(self, user_id: int, exam_id: int) -> Optional[ExamResult]:
        ...

    @abstractmethod
    def count_completed(self) -> int:
        ...

    @abstractmethod
    def completed_percentages(self) -> list[int]:
        ...


class ExamAnswerRepository(Protocol):
    @abstractmethod
    def find(self, result_id: int, question_id: int) -> Optional[ExamAnswer]:
        ...

    @abstractmethod
    def create(
        self,
        result_id: int,
        question_id: int,
        selected_answer: int,
        is_correct: bool,
        time_spent: Optional[int],
    ) -> ExamAnswer:
        """Raises ConflictError if the question was already answered for this result."""
        ...

    @abstractmethod
    def list_for_result(self, result_id: int) -> list[ExamAnswer]:
        ...

    @abstractmethod
    def list_graded(self, result_id: int) -> list[GradedAnswer]:
        """Answers joined with their question's indicator and professor subject."""
        ...

    @abstractmethod
    def list_review(self, result_id: int) -> list[AnswerReview]:
        """Answers with their full question, in answering order."""
        ...


class ExamReportRepository(Protocol):
    @abstractmethod
    def get_for_result(self, result_id: int) -> Optional[ExamReport]:
        ...

    @abstractmethod
    def create(self, result_id: int, draft: ReportDraft) -> ExamReport:
        """Raises ConflictError if the result already has a report."""
        ...

    @abstractmethod
    def list_for_user(self, user_id: int) -> list[ExamReport]:
        """Newest first."""
        ...

    @abstractmethod
    def all_subject_breakdowns(self) -> list[dict[str, int]]:
        ...


class UserRepository(Protocol):
    @abstractmethod
    def get_student(self, user_id: int) -> Optional[Student]:
        ...

    @abstractmethod
    def count_students(self) -> int:
        ...
