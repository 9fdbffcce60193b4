from .result import (
    AnswerInputSerializer,
    ExamAnswerSerializer,
    ExamResultSerializer,
    ProfileResultSerializer,
    ReportSummarySerializer,
)
from .report import (
    AdminStatisticsSerializer,
    MyReportStatsSerializer,
    ReportCheckSerializer,
    ReportDetailSerializer,
    ReportListSerializer,
    ReportSerializer,
    StudentReportSerializer,
)

__all__ = [
    "AnswerInputSerializer",
    "ExamAnswerSerializer",
    "ExamResultSerializer",
    "ProfileResultSerializer",
    "ReportSummarySerializer",
    "AdminStatisticsSerializer",
    "MyReportStatsSerializer",
    "ReportCheckSerializer",
    "ReportDetailSerializer",
    "ReportListSerializer",
    "ReportSerializer",
    "StudentReportSerializer",
]
