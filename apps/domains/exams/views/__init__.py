from .question_view import QuestionViewSet
from .exam_view import ExamViewSet
from .session_view import (
    ExamAnswerView,
    ExamFinishView,
    ExamSessionView,
    ExamStartView,
    LatestResultView,
    MyResultsView,
)

__all__ = [
    "QuestionViewSet",
    "ExamViewSet",
    "ExamStartView",
    "ExamSessionView",
    "ExamAnswerView",
    "ExamFinishView",
    "MyResultsView",
    "LatestResultView",
]
