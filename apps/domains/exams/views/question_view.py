# PATH: apps/domains/exams/views/question_view.py
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from django_filters.rest_framework import DjangoFilterBackend

from apps.api.common.pagination import LimitPagePagination
from apps.core.permissions import IsAdminOrReadOnly
from exampass.adapters.db.django import repositories_exams as exam_repo

from apps.domains.exams.filters import QuestionFilter
from apps.domains.exams.serializers import QuestionSerializer
from apps.domains.exams.services import QuestionService


class QuestionViewSet(ModelViewSet):
    """
    Question bank
    - read: any authenticated user (correctAnswer hidden unless ADMIN)
    - write / toggle / delete: ADMIN
    """
    serializer_class = QuestionSerializer
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = LimitPagePagination
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    filter_backends = [DjangoFilterBackend]
    filterset_class = QuestionFilter

    def get_queryset(self):
        return exam_repo.question_all().order_by("-created_at", "-id")

    def perform_create(self, serializer):
        QuestionService.create(serializer=serializer)

    def perform_destroy(self, instance):
        QuestionService.delete(question=instance)

    @action(detail=False, methods=["get"], url_path="indicators", pagination_class=None)
    def indicators(self, request):
        return Response({"indicators": exam_repo.question_indicators()})

    @action(detail=True, methods=["patch"], url_path="toggle")
    def toggle(self, request, pk=None):
        question = QuestionService.toggle(question=self.get_object())
        data = self.get_serializer(question).data
        state = "activated" if question.is_active else "deactivated"
        return Response({"message": f"Question {state}.", "question": data})
