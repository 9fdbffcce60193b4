# PATH: apps/domains/exams/views/exam_view.py
from rest_framework import mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from drf_yasg.utils import swagger_auto_schema

from apps.core.permissions import IsAdminRole, IsStudentRole
from exampass.adapters.db.django import repositories_exams as exam_repo
from exampass.adapters.db.django.uow import DjangoUnitOfWork
from exampass.application.use_cases.exams import available_exam

from apps.domains.exams.serializers import (
    ExamDetailSerializer,
    ExamGenerateSerializer,
    ExamSerializer,
    ExamStatusSerializer,
    StudentExamSerializer,
    StudentQuestionSerializer,
)
from apps.domains.exams.services import ExamFactory


class ExamViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, GenericViewSet):
    """
    Exams
    - list / retrieve / generate / status: ADMIN
    - available: STUDENT
    """
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_permissions(self):
        if self.action == "available":
            return [IsStudentRole()]
        return [IsAdminRole()]

    def get_queryset(self):
        return exam_repo.exam_all_with_counts().order_by("-created_at", "-id")

    def get_serializer_class(self):
        if self.action == "retrieve":
            return ExamDetailSerializer
        return ExamSerializer

    @swagger_auto_schema(request_body=ExamGenerateSerializer, responses={201: ExamDetailSerializer})
    @action(detail=False, methods=["post"], url_path="generate")
    def generate(self, request):
        serializer = ExamGenerateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        exam = ExamFactory.generate(
            title=data["title"],
            description=data.get("description", ""),
            status=data["status"],
            time_limit=data.get("timeLimit"),
            question_ids=data["questionIds"],
        )
        exam = self.get_queryset().get(pk=exam.pk)
        return Response(
            {
                "message": "Exam created successfully",
                "exam": ExamDetailSerializer(exam, context=self.get_serializer_context()).data,
            },
            status=status.HTTP_201_CREATED,
        )

    @swagger_auto_schema(request_body=ExamStatusSerializer, responses={200: ExamSerializer})
    @action(detail=True, methods=["patch"], url_path="status")
    def change_status(self, request, pk=None):
        serializer = ExamStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        exam = ExamFactory.set_status(exam_id=pk, status=serializer.validated_data["status"])
        exam = self.get_queryset().get(pk=exam.pk)
        return Response(
            {
                "message": "Exam status updated",
                "exam": ExamSerializer(exam, context=self.get_serializer_context()).data,
            }
        )

    @action(detail=False, methods=["get"], url_path="available")
    def available(self, request):
        found = available_exam(DjangoUnitOfWork(), request.user.pk)
        if found is None:
            return Response({
                "data": [],
                "message": "No exams available, or every available exam has been completed.",
            })
        exam, questions = found
        payload = StudentExamSerializer(exam).data
        payload["questions"] = StudentQuestionSerializer(questions, many=True).data
        return Response({"data": [payload], "message": "Available exam found"})
