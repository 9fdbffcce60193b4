# apps/core/views.py
import logging

from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from drf_yasg.utils import swagger_auto_schema

from apps.api.common.auth_jwt import tokens_for_user
from apps.core.serializers import RegisterSerializer, UserSerializer
from apps.domains.results.serializers import ProfileResultSerializer
from exampass.adapters.db.django import repositories_results as result_repo

logger = logging.getLogger(__name__)


# --------------------------------------------------
# Auth: /auth/register
# --------------------------------------------------

class RegisterView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(request_body=RegisterSerializer, responses={201: UserSerializer})
    def post(self, request):
        serializer = RegisterSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("user registered id=%s role=%s", user.pk, user.role)
        return Response(
            {
                "message": "User registered successfully",
                **tokens_for_user(user),
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED,
        )


# --------------------------------------------------
# Auth: /auth/profile, /auth/verify
# --------------------------------------------------

class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        data = UserSerializer(request.user).data
        data["examResults"] = ProfileResultSerializer(
            result_repo.result_filter_user(request.user.pk),
            many=True,
        ).data
        return Response({"user": data})


class VerifyView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({"valid": True, "user": UserSerializer(request.user).data})
