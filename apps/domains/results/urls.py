# PATH: apps/domains/results/urls.py

from django.urls import path

from apps.domains.results.views import (
    AdminStatisticsView,
    AdminStudentReportView,
    MyReportsView,
    ReportCheckView,
    ReportDetailView,
    ReportGenerateView,
)

urlpatterns = [
    # ======================================================
    # Student / owner
    # ======================================================
    path("generate/<int:result_id>/", ReportGenerateView.as_view(), name="report-generate"),
    path("check/<int:result_id>/", ReportCheckView.as_view(), name="report-check"),
    path("my/reports/", MyReportsView.as_view(), name="report-my-list"),

    # ======================================================
    # Admin
    # ======================================================
    path("admin/statistics/", AdminStatisticsView.as_view(), name="report-admin-statistics"),
    path("admin/student/<int:user_id>/", AdminStudentReportView.as_view(), name="report-admin-student"),

    # keep last: bare id
    path("<int:result_id>/", ReportDetailView.as_view(), name="report-detail"),
]
