from .report_view import ReportCheckView, ReportDetailView, ReportGenerateView
from .statistics_view import AdminStatisticsView, AdminStudentReportView, MyReportsView

__all__ = [
    "ReportGenerateView",
    "ReportCheckView",
    "ReportDetailView",
    "MyReportsView",
    "AdminStatisticsView",
    "AdminStudentReportView",
]
