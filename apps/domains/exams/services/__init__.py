from .exam_factory import ExamFactory
from .question_service import QuestionService

__all__ = ["ExamFactory", "QuestionService"]
