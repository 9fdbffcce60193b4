# PATH: apps/domains/professors/views.py
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from django_filters.rest_framework import DjangoFilterBackend

from apps.core.permissions import IsAdminOrReadOnly
from exampass.adapters.db.django import repositories_professors as professor_repo

from .serializers import ProfessorDetailSerializer, ProfessorSerializer
from .services import ProfessorService


class ProfessorViewSet(ModelViewSet):
    """
    Professors
    - read: any authenticated user
    - write: ADMIN
    """
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = None
    lookup_value_regex = r"\d+"
    http_method_names = ["get", "post", "put", "patch", "delete", "head", "options"]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ["status"]
    search_fields = ["name", "subject"]
    ordering_fields = ["created_at", "name", "subject"]
    ordering = ["-created_at", "-id"]

    def get_queryset(self):
        return professor_repo.professor_all()

    def get_serializer_class(self):
        if self.action == "retrieve":
            return ProfessorDetailSerializer
        return ProfessorSerializer

    def perform_create(self, serializer):
        ProfessorService.create(serializer=serializer)

    def perform_update(self, serializer):
        ProfessorService.update(serializer=serializer)

    def perform_destroy(self, instance):
        ProfessorService.delete(professor=instance)

    @action(detail=False, methods=["get"], url_path=r"subject/(?P<subject>[^/]+)")
    def by_subject(self, request, subject=None):
        qs = professor_repo.professor_filter_subject(subject)
        return Response(ProfessorSerializer(qs, many=True).data)
