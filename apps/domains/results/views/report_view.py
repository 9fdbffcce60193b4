# PATH: apps/domains/results/views/report_view.py
from __future__ import annotations

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.results.serializers import (
    ExamResultSerializer,
    ReportCheckSerializer,
    ReportDetailSerializer,
    ReportSerializer,
)
from exampass.adapters.db.django.uow import DjangoUnitOfWork
from exampass.application.use_cases.exams import check_report, generate_report, get_report
from exampass.domain.shared.identity import Caller


class ReportGenerateView(APIView):
    """
    POST /reports/generate/<result_id>/

    owner or ADMIN; the result must be COMPLETED; one report per result.
    """
    permission_classes = [IsAuthenticated]

    def post(self, request, result_id: int):
        generated = generate_report(
            DjangoUnitOfWork(),
            result_id=int(result_id),
            caller=Caller.from_user(request.user),
            strength_threshold=settings.REPORT_STRENGTH_THRESHOLD,
            weakness_threshold=settings.REPORT_WEAKNESS_THRESHOLD,
        )
        return Response(
            {
                "message": "Report generated successfully",
                "report": ReportSerializer(generated.report).data,
                "examResult": ExamResultSerializer(generated.result).data,
            },
            status=status.HTTP_201_CREATED,
        )


class ReportCheckView(APIView):
    """GET /reports/check/<result_id>/"""
    permission_classes = [IsAuthenticated]

    def get(self, request, result_id: int):
        checked = check_report(DjangoUnitOfWork(), int(result_id), Caller.from_user(request.user))
        return Response(ReportCheckSerializer(checked).data)


class ReportDetailView(APIView):
    """GET /reports/<result_id>/ (owner or ADMIN)"""
    permission_classes = [IsAuthenticated]

    def get(self, request, result_id: int):
        detail = get_report(DjangoUnitOfWork(), int(result_id), Caller.from_user(request.user))
        return Response({"report": ReportDetailSerializer(detail).data})
