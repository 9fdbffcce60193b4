# apps/domains/results/models/__init__.py
from .exam_result import ExamResult
from .exam_answer import ExamAnswer
from .exam_report import ExamReport

__all__ = [
    "ExamResult",
    "ExamAnswer",
    "ExamReport",
]
