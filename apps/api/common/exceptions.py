# PATH: apps/api/common/exceptions.py
"""
DRF EXCEPTION_HANDLER

Every error leaves the API as {"error": <message>, "code": <CODE>}.
- exampass domain errors: status from DOMAIN_ERROR_STATUS
- DRF / Django errors: DRF's status, message and code normalised
- IntegrityError that escaped an adapter: 409 CONFLICT
Domain error details (ids, counts) are part of the payload; tracebacks never are.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from django.db import IntegrityError
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from exampass.domain.exams.errors import (
    ConflictError,
    DomainValidationError,
    ExamDomainError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


DOMAIN_ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidStateError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    DomainValidationError: status.HTTP_400_BAD_REQUEST,
}

DRF_ERROR_CODES = {
    exceptions.NotAuthenticated: "UNAUTHORIZED",
    exceptions.AuthenticationFailed: "UNAUTHORIZED",
    exceptions.PermissionDenied: "FORBIDDEN",
    exceptions.NotFound: "NOT_FOUND",
    exceptions.ValidationError: "VALIDATION",
    exceptions.ParseError: "VALIDATION",
    exceptions.MethodNotAllowed: "METHOD_NOT_ALLOWED",
    exceptions.Throttled: "THROTTLED",
}


def error_body(message: str, code: str, **extra: Any) -> dict[str, Any]:
    body = {"error": message, "code": code}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def _domain_response(exc: ExamDomainError) -> Response:
    http_status = status.HTTP_400_BAD_REQUEST
    for cls, mapped in DOMAIN_ERROR_STATUS.items():
        if isinstance(exc, cls):
            http_status = mapped
            break
    details = exc.details or None
    return Response(error_body(exc.message, exc.code, details=details), status=http_status)


def _first_message(detail: Any) -> Optional[str]:
    if isinstance(detail, dict):
        for value in detail.values():
            found = _first_message(value)
            if found:
                return found
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            found = _first_message(value)
            if found:
                return found
        return None
    return str(detail) if detail is not None else None


def _drf_code(exc: exceptions.APIException) -> str:
    for cls, code in DRF_ERROR_CODES.items():
        if isinstance(exc, cls):
            return code
    return str(getattr(exc, "default_code", "error")).upper()


def api_exception_handler(exc, context):
    if isinstance(exc, ExamDomainError):
        return _domain_response(exc)

    if isinstance(exc, IntegrityError):
        logger.warning("integrity error reached the API: %s", exc)
        return _domain_response(ConflictError())

    response = drf_exception_handler(exc, context)
    if response is None:
        # not an API error: UnhandledExceptionMiddleware answers with 500
        return None

    if isinstance(exc, exceptions.APIException):
        detail = exc.detail
        code = _drf_code(exc)
    else:
        # Http404 / django PermissionDenied, already converted by DRF
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        code = {404: "NOT_FOUND", 403: "FORBIDDEN"}.get(response.status_code, "ERROR")

    # views raise NotFound({"detail": "...", "code": "..."})
    if isinstance(detail, dict) and "detail" in detail and len(detail) <= 2:
        message = _first_message(detail.get("detail"))
        if "code" in detail:
            code = str(_first_message(detail["code"]))
        response.data = error_body(message or "", code)
        return response

    message = _first_message(detail) or "Request failed."
    fields = detail if isinstance(exc, exceptions.ValidationError) and isinstance(detail, dict) else None
    response.data = error_body(message, code, fields=fields)
    return response
