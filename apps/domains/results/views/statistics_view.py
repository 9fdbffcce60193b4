# PATH: apps/domains/results/views/statistics_view.py
from __future__ import annotations

from django.conf import settings
from rest_framework.generics import ListAPIView
from rest_framework.response import Response
from rest_framework.views import APIView

from django_filters.rest_framework import DjangoFilterBackend

from apps.api.common.pagination import LimitPagePagination
from apps.core.permissions import IsAdminRole, IsStudentRole
from apps.domains.results.filters import MyReportFilter
from apps.domains.results.serializers import (
    AdminStatisticsSerializer,
    MyReportStatsSerializer,
    ReportListSerializer,
    StudentReportSerializer,
)
from exampass.adapters.db.django import repositories_results as result_repo
from exampass.adapters.db.django.uow import DjangoUnitOfWork
from exampass.application.use_cases.exams import admin_statistics, my_report_stats, student_report
from exampass.domain.shared.identity import Caller


class MyReportsView(ListAPIView):
    """
    GET /reports/my/reports/?page&limit&search&dateFrom&dateTo&minScore&maxScore

    Filters narrow the page only; `stats` always covers every completed result.
    """
    permission_classes = [IsStudentRole]
    serializer_class = ReportListSerializer
    pagination_class = LimitPagePagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = MyReportFilter

    def get_queryset(self):
        return result_repo.report_filter_user(self.request.user.pk)

    def list(self, request, *args, **kwargs):
        response = super().list(request, *args, **kwargs)
        stats = my_report_stats(DjangoUnitOfWork(), request.user.pk)
        response.data["stats"] = MyReportStatsSerializer(stats).data
        return response


class AdminStatisticsView(APIView):
    """GET /reports/admin/statistics/"""
    permission_classes = [IsAdminRole]

    def get(self, request):
        stats = admin_statistics(
            DjangoUnitOfWork(),
            Caller.from_user(request.user),
            hardest=settings.STATS_HARDEST_QUESTIONS,
            easiest=settings.STATS_EASIEST_QUESTIONS,
        )
        return Response(AdminStatisticsSerializer(stats).data)


class AdminStudentReportView(APIView):
    """GET /reports/admin/student/<user_id>/"""
    permission_classes = [IsAdminRole]

    def get(self, request, user_id: int):
        report = student_report(DjangoUnitOfWork(), int(user_id), Caller.from_user(request.user))
        return Response(StudentReportSerializer(report).data)
