import django_filters
from django.db.models import Q

from .models import Question


class QuestionFilter(django_filters.FilterSet):
    """
    Question list filters; every given filter narrows the same queryset (AND)
    - search: header OR indicator contains
    - professor: professor id
    - indicator: indicator contains
    - isActive: true / false
    """

    search = django_filters.CharFilter(method="filter_search")
    professor = django_filters.NumberFilter(field_name="professor_id")
    indicator = django_filters.CharFilter(field_name="educational_indicator", lookup_expr="icontains")
    isActive = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = Question
        fields = ["search", "professor", "indicator", "isActive"]

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(header__icontains=value) |
            Q(educational_indicator__icontains=value)
        )
