"""
Core repository: User lookups. ORM imports stay inside the functions.
"""
from __future__ import annotations

from typing import Any, Optional

from exampass.domain.exams.entities import Student


# ---------------------------------------------------------------------------
# User (views / serializers)
# ---------------------------------------------------------------------------


def user_get_by_email(email: str) -> Optional[Any]:
    from django.contrib.auth import get_user_model
    raw = (email or "").strip()
    if not raw:
        return None
    return get_user_model().objects.filter(email__iexact=raw).first()


def user_exists_email(email: str) -> bool:
    from django.contrib.auth import get_user_model
    return get_user_model().objects.filter(email__iexact=(email or "").strip()).exists()


def user_create(email: str, password: str, name: str, role: str):
    from django.contrib.auth import get_user_model
    return get_user_model().objects.create_user(
        email=email,
        password=password,
        name=name,
        role=role,
    )


def user_get_or_create_admin(email: str, name: str) -> tuple[Any, bool]:
    from django.contrib.auth import get_user_model
    User = get_user_model()
    return User.objects.get_or_create(
        email=email,
        defaults={
            "username": email,
            "name": name,
            "role": User.Role.ADMIN,
            "is_staff": True,
            "is_active": True,
        },
    )


def student_filter():
    from django.contrib.auth import get_user_model
    User = get_user_model()
    return User.objects.filter(role=User.Role.STUDENT)


# ---------------------------------------------------------------------------
# UserRepository (port)
# ---------------------------------------------------------------------------


def _user_to_student(m) -> Optional[Student]:
    if m is None:
        return None
    return Student(
        id=int(m.pk),
        name=m.name or "",
        email=m.email,
        created_at=m.date_joined,
    )


class DjangoUserRepository:
    def get_student(self, user_id: int) -> Optional[Student]:
        return _user_to_student(student_filter().filter(pk=user_id).first())

    def count_students(self) -> int:
        return student_filter().count()
