"""
Shared domain: verified caller identity (no Django imports)

The HTTP layer authenticates the request and hands the core a Caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Kept in sync with apps.core.models.User.Role choices."""
    ADMIN = "ADMIN"
    STUDENT = "STUDENT"


@dataclass(frozen=True)
class Caller:
    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def can_access(self, owner_id: int) -> bool:
        """Admins see everything; everyone else only what they own."""
        return self.is_admin or int(self.user_id) == int(owner_id)

    @classmethod
    def from_user(cls, user) -> "Caller":
        raw = str(getattr(user, "role", "") or "").upper()
        role = Role.ADMIN if raw == Role.ADMIN.value else Role.STUDENT
        return cls(user_id=int(user.pk), role=role)
