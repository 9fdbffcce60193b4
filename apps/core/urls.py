# apps/core/urls.py

from django.urls import path

from rest_framework_simplejwt.views import TokenRefreshView

from apps.api.common.auth_jwt import EmailTokenObtainPairView
from apps.core.views import ProfileView, RegisterView, VerifyView

urlpatterns = [
    path("register/", RegisterView.as_view(), name="auth-register"),
    path("login/", EmailTokenObtainPairView.as_view(), name="auth-login"),
    path("token/refresh/", TokenRefreshView.as_view(), name="auth-token-refresh"),
    path("profile/", ProfileView.as_view(), name="auth-profile"),
    path("verify/", VerifyView.as_view(), name="auth-verify"),
]
