# quizmaster/submissions/policy.py
"""Per-quiz auto-approval switch, read by the ledger at submission time."""
from __future__ import annotations

from flask import current_app

from ..catalog.service import get_quiz, require_bool
from ..extensions import db


def get_auto_approve(quiz_id) -> bool:
    return bool(get_quiz(quiz_id).auto_approve)


def set_auto_approve(quiz_id, enabled) -> bool:
    require_bool(enabled, "auto_approve")
    quiz = get_quiz(quiz_id)
    quiz.auto_approve = enabled
    db.session.commit()
    current_app.logger.info("Quiz id=%s auto_approve=%s", quiz.id, enabled)
    return enabled
