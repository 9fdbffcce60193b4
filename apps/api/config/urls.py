# PATH: apps/api/config/urls.py
from django.contrib import admin
from django.urls import path, include, re_path
from django.conf import settings
import sys

from rest_framework import permissions
from drf_yasg import openapi
from drf_yasg.views import get_schema_view

from apps.api.common.views import health_check, root_banner


schema_view = get_schema_view(
    openapi.Info(
        title="ExamPass API",
        default_version="v1",
        description="Exam administration: questions, exams, sessions, reports and statistics.",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)


urlpatterns = [
    # =========================
    # Service
    # =========================
    path("", root_banner, name="root"),
    path("health/", health_check, name="health"),

    # =========================
    # Admin
    # =========================
    path("admin/", admin.site.urls),

    # =========================
    # API v1
    # =========================
    path("api/v1/", include("apps.api.v1.urls")),

    # =========================
    # Docs
    # =========================
    re_path(r"^swagger(?P<format>\.json|\.yaml)$", schema_view.without_ui(cache_timeout=0), name="schema-json"),
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
]

# =========================
# Debug Toolbar (DEBUG only)
# =========================
if settings.DEBUG and "runserver" in sys.argv:
    import debug_toolbar
    urlpatterns += [
        path("__debug__/", include(debug_toolbar.urls)),
    ]
