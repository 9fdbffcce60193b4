"""
Unit of Work port: transaction boundary (no Django)
"""
from __future__ import annotations

from typing import Protocol

from exampass.application.ports.repositories import (
    ExamAnswerRepository,
    ExamReportRepository,
    ExamRepository,
    ExamResultRepository,
    ProfessorRepository,
    QuestionRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Starts in __enter__, commits or rolls back in __exit__."""

    @property
    def exams(self) -> ExamRepository:
        ...

    @property
    def questions(self) -> QuestionRepository:
        ...

    @property
    def professors(self) -> ProfessorRepository:
        ...

    @property
    def results(self) -> ExamResultRepository:
        ...

    @property
    def answers(self) -> ExamAnswerRepository:
        ...

    @property
    def reports(self) -> ExamReportRepository:
        ...

    @property
    def users(self) -> UserRepository:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...
