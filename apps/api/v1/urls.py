# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Auth
    # =========================
    path("auth/", include("apps.core.urls")),

    # =========================
    # Domain APIs
    # =========================
    path("professors/", include("apps.domains.professors.urls")),

    # exams/..., questions/...
    path("", include("apps.domains.exams.urls")),

    path("reports/", include("apps.domains.results.urls")),
]
