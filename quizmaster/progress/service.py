# quizmaster/progress/service.py
"""
Shared progress cursor: one integer per quiz naming the card every player
is currently on.

Writes are absolute sets, never read-modify-write increments, so concurrent
callers can race without lost updates; the last write stored wins. Clients
clamp the value against the card count, the cursor itself has no upper bound.
"""
from __future__ import annotations

from flask import current_app

from ..catalog.service import get_quiz
from ..errors import InvalidArgument
from ..extensions import db
from ..models import Quiz


def get_progress(quiz_id) -> int:
    return int(get_quiz(quiz_id).progress_cursor or 0)


def set_progress(quiz_id, new_index) -> int:
    if isinstance(new_index, bool) or not isinstance(new_index, int):
        raise InvalidArgument("progress index must be a non-negative integer")
    if new_index < 0:
        raise InvalidArgument("progress index must be a non-negative integer")

    quiz = get_quiz(quiz_id)

    # single-row UPDATE; no version check
    db.session.query(Quiz).filter(Quiz.id == quiz.id).update(
        {Quiz.progress_cursor: new_index}, synchronize_session="fetch"
    )
    db.session.commit()

    current_app.logger.info("Quiz id=%s progress set to %s", quiz.id, new_index)
    return new_index


def reset_progress(quiz_id) -> int:
    """Back to the first card. Submissions are kept."""
    return set_progress(quiz_id, 0)
