from .question import QuestionSerializer, StudentQuestionSerializer
from .exam import (
    ExamDetailSerializer,
    ExamGenerateSerializer,
    ExamSerializer,
    ExamStatusSerializer,
    StudentExamSerializer,
)

__all__ = [
    "QuestionSerializer",
    "StudentQuestionSerializer",
    "ExamSerializer",
    "ExamDetailSerializer",
    "ExamGenerateSerializer",
    "ExamStatusSerializer",
    "StudentExamSerializer",
]
