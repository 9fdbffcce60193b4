# apps/domains/exams/models/__init__.py
from .question import Question
from .exam import Exam, ExamQuestion

__all__ = [
    "Question",
    "Exam",
    "ExamQuestion",
]
