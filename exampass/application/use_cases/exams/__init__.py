from exampass.application.use_cases.exams.sessions import (
    available_exam,
    get_session,
    latest_completed_result,
    most_recent_result,
    record_answer,
    start_session,
    submit_session,
)
from exampass.application.use_cases.exams.reports import check_report, generate_report, get_report
from exampass.application.use_cases.exams.statistics import (
    admin_statistics,
    my_report_stats,
    student_report,
)

__all__ = [
    "available_exam",
    "start_session",
    "get_session",
    "record_answer",
    "submit_session",
    "most_recent_result",
    "latest_completed_result",
    "generate_report",
    "check_report",
    "get_report",
    "my_report_stats",
    "admin_statistics",
    "student_report",
]
