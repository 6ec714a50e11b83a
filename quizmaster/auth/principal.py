# quizmaster/auth/principal.py
from __future__ import annotations

from typing import Optional

from flask_login import UserMixin

ROLES = ("validation", "admin")


class Moderator(UserMixin):
    """Session-only principal; there is no user table behind it."""

    def __init__(self, role: str):
        self.role = role
        self.id = f"moderator:{role}"

    @classmethod
    def from_id(cls, user_id: str) -> Optional["Moderator"]:
        prefix, _, role = (user_id or "").partition(":")
        if prefix != "moderator" or role not in ROLES:
            return None
        return cls(role)
