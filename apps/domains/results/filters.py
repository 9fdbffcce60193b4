import django_filters

from .models import ExamReport


class MyReportFilter(django_filters.FilterSet):
    """
    Student report list
    - search: exam title contains
    - dateFrom / dateTo: completion date, both days inclusive
    - minScore / maxScore: result percentage
    """

    search = django_filters.CharFilter(field_name="exam_result__exam__title", lookup_expr="icontains")
    dateFrom = django_filters.DateFilter(field_name="exam_result__completed_at", lookup_expr="date__gte")
    dateTo = django_filters.DateFilter(field_name="exam_result__completed_at", lookup_expr="date__lte")
    minScore = django_filters.NumberFilter(field_name="exam_result__percentage", lookup_expr="gte")
    maxScore = django_filters.NumberFilter(field_name="exam_result__percentage", lookup_expr="lte")

    class Meta:
        model = ExamReport
        fields = ["search", "dateFrom", "dateTo", "minScore", "maxScore"]
