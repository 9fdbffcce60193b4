# apps/domains/exams/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import (
    ExamAnswerView,
    ExamFinishView,
    ExamSessionView,
    ExamStartView,
    ExamViewSet,
    LatestResultView,
    MyResultsView,
    QuestionViewSet,
)

router = SimpleRouter()
router.register("exams", ExamViewSet, basename="exam")
router.register("questions", QuestionViewSet, basename="question")

# session routes go first; router detail routes only match digits anyway
urlpatterns = [
    path("exams/my-results/", MyResultsView.as_view(), name="exam-my-results"),
    path("exams/<int:exam_id>/start/", ExamStartView.as_view(), name="exam-start"),
    path("exams/<int:exam_id>/session/", ExamSessionView.as_view(), name="exam-session"),
    path("exams/<int:exam_id>/latest-result/", LatestResultView.as_view(), name="exam-latest-result"),
    path("exams/results/<int:result_id>/answer/", ExamAnswerView.as_view(), name="exam-answer"),
    path("exams/results/<int:result_id>/finish/", ExamFinishView.as_view(), name="exam-finish"),
] + router.urls
