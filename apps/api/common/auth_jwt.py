# JWT login by email (simplejwt). Response carries the tokens and the user.
from __future__ import annotations

import logging

from exampass.adapters.db.django import repositories_core as core_repo
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView

logger = logging.getLogger(__name__)


def tokens_for_user(user) -> dict:
    refresh = EmailTokenObtainPairSerializer.get_token(user)
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """email + password -> access/refresh. Role travels inside the token."""

    username_field = "email"

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        return token

    def validate(self, attrs):
        email = (attrs.get("email") or "").strip()
        password = attrs.get("password") or ""
        if not email or not password:
            raise serializers.ValidationError({"detail": "Email and password are required."})

        user = core_repo.user_get_by_email(email)
        if not user or not user.check_password(password):
            logger.info("login rejected email=%s", email)
            raise AuthenticationFailed("Invalid credentials.")
        if not user.is_active:
            raise AuthenticationFailed("This account is disabled.")

        from apps.core.serializers import UserSerializer

        logger.info("login ok user=%s role=%s", user.pk, user.role)
        return {
            **tokens_for_user(user),
            "user": UserSerializer(user).data,
        }


class EmailTokenObtainPairView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer

    def get_authenticate_header(self, request):
        # bad credentials answer 401, not DRF's 403 fallback
        return 'Bearer realm="api"'
