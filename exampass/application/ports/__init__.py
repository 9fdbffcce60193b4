
from exampass.application.ports.unit_of_work import UnitOfWork
from exampass.application.ports.repositories import (
    ExamAnswerRepository,
    ExamReportRepository,
    ExamRepository,
    ExamResultRepository,
    ProfessorRepository,
    QuestionRepository,
    UserRepository,
)

__all__ = [
    "UnitOfWork",
    "ExamRepository",
    "QuestionRepository",
    "ProfessorRepository",
    "ExamResultRepository",
    "ExamAnswerRepository",
    "ExamReportRepository",
    "UserRepository",
]
