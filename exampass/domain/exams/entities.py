"""
Exam domain entities (pure Python, no Django/ORM)

Lifecycle rules live on the entities; persistence is the adapters' job.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from exampass.domain.shared.rounding import percent


class ExamStatus(str, Enum):
    """Kept in sync with apps.domains.exams.models.Exam.Status."""
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class ResultStatus(str, Enum):
    """Kept in sync with apps.domains.results.models.ExamResult.Status."""
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


ALTERNATIVES_PER_QUESTION = 4


@dataclass
class Professor:
    id: int
    name: str
    subject: str
    email: Optional[str] = None
    phone: Optional[str] = None
    bio: str = ""
    status: str = "ACTIVE"


@dataclass
class Question:
    id: int
    header: str
    alternatives: list[str]
    correct_answer: int
    educational_indicator: str
    is_active: bool = True
    professor_id: Optional[int] = None
    professor_name: str = ""
    subject: str = ""
    # position inside an exam, only set when loaded through an exam
    order: Optional[int] = None

    def is_correct(self, selected_answer: int) -> bool:
        return int(selected_answer) == int(self.correct_answer)


@dataclass
class Exam:
    id: int
    title: str
    status: ExamStatus
    total_questions: int
    description: str = ""
    # minutes; None or 0 means unlimited
    time_limit: Optional[int] = None
    created_at: Optional[datetime] = None

    def is_active(self) -> bool:
        return self.status == ExamStatus.ACTIVE

    @property
    def time_limit_seconds(self) -> Optional[int]:
        if not self.time_limit:
            return None
        return int(self.time_limit) * 60


@dataclass
class ExamResult:
    """
    One attempt by one student.

    IN_PROGRESS -> COMPLETED, once. total_questions is captured at start
    and never recomputed from the live exam.
    """
    id: int
    user_id: int
    exam_id: int
    status: ResultStatus
    started_at: datetime
    total_questions: int
    total_score: int = 0
    percentage: int = 0
    completed_at: Optional[datetime] = None
    exam_title: str = ""

    @property
    def is_in_progress(self) -> bool:
        return self.status == ResultStatus.IN_PROGRESS

    @property
    def is_completed(self) -> bool:
        return self.status == ResultStatus.COMPLETED

    def elapsed_seconds(self, now: datetime) -> int:
        return max(0, int((now - self.started_at).total_seconds()))

    def remaining_seconds(self, time_limit_seconds: Optional[int], now: datetime) -> Optional[int]:
        """None when the exam has no time limit."""
        if not time_limit_seconds:
            return None
        return max(0, int(time_limit_seconds) - self.elapsed_seconds(now))


@dataclass
class ExamAnswer:
    id: int
    exam_result_id: int
    question_id: int
    selected_answer: int
    is_correct: bool
    time_spent: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class GradedAnswer:
    """An answer joined with the tags the report groups by."""
    question_id: int
    is_correct: bool
    educational_indicator: str
    subject: str


@dataclass
class ExamReport:
    id: int
    exam_result_id: int
    indicators: dict[str, int]
    subjects: dict[str, int]
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    assigned_professor: Optional[str] = None
    professor_subject: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def content_breakdown(self) -> dict[str, Any]:
        return {"indicators": dict(self.indicators), "subjects": dict(self.subjects)}


@dataclass(frozen=True)
class ReportDraft:
    """Computed report content, not yet persisted."""
    indicators: dict[str, int]
    subjects: dict[str, int]
    strengths: list[str]
    weaknesses: list[str]
    recommendations: list[str]
    assigned_professor: Optional[str] = None
    professor_subject: Optional[str] = None

    def with_referral(self, professor_name: str, professor_subject: str, line: str) -> "ReportDraft":
        return replace(
            self,
            recommendations=[*self.recommendations, line],
            assigned_professor=professor_name,
            professor_subject=professor_subject,
        )


@dataclass(frozen=True)
class QuestionAnswerStats:
    question_id: int
    header: str
    educational_indicator: str
    subject: str
    total_answers: int
    correct_answers: int

    @property
    def correct_rate(self) -> int:
        return percent(self.correct_answers, self.total_answers)


@dataclass
class Student:
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AnswerReview:
    """One answered question as shown back in a report."""
    question_id: int
    header: str
    alternatives: list[str]
    correct_answer: int
    selected_answer: int
    is_correct: bool
    educational_indicator: str
    professor_name: str
    subject: str
    time_spent: Optional[int] = None
