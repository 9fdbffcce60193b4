"""
Exam domain errors (pure Python)

Every error carries a stable `code` and a human-readable message.
apps.api.common.exceptions maps them onto HTTP responses.
"""
from __future__ import annotations

from typing import Any, Optional


class ExamDomainError(Exception):
    code = "ERROR"
    default_message = "The request could not be completed."

    def __init__(self, message: Optional[str] = None, *, details: Optional[dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(ExamDomainError):
    """Entity absent or not visible to the caller."""
    code = "NOT_FOUND"
    default_message = "Resource not found."


class InvalidStateError(ExamDomainError):
    """Operation not legal in the entity's current status."""
    code = "INVALID_STATE"
    default_message = "The operation is not allowed in the current state."


class ConflictError(ExamDomainError):
    """Uniqueness / idempotency violation."""
    code = "CONFLICT"
    default_message = "The resource already exists."


class ForbiddenError(ExamDomainError):
    code = "FORBIDDEN"
    default_message = "You do not have permission to access this resource."


class DomainValidationError(ExamDomainError):
    code = "VALIDATION"
    default_message = "Invalid input."
