# quizmaster/submissions/service.py
"""
Submission ledger.

A submission is created once per answer and only its status ever changes:

    pending -> approved | rejected

Both targets are terminal. A transition out of a terminal status raises
InvalidState and leaves the row untouched.
"""
from __future__ import annotations

from datetime import datetime

from flask import current_app

from ..catalog.service import coerce_id, get_card, get_category
from ..errors import InvalidArgument, InvalidState, NotFound
from ..extensions import db
from ..models import (
    Submission,
    STATUS_PENDING,
    STATUS_APPROVED,
    TERMINAL_STATUSES,
)


def get_submission(submission_id) -> Submission:
    sub = db.session.get(Submission, coerce_id(submission_id, "submission_id"))
    if sub is None:
        raise NotFound(f"Submission {submission_id} not found")
    return sub


def _check_transition(sub: Submission, target: str) -> None:
    if target not in TERMINAL_STATUSES:
        raise InvalidArgument(f"Invalid status {target!r}; expected one of {TERMINAL_STATUSES}")
    if sub.is_terminal:
        raise InvalidState(f"Submission {sub.id} is already {sub.status}")


def create_submission(user_name, card_id, category_id) -> Submission:
    """
    Record one answer. When the quiz auto-approves, the row is approved
    before the single commit, so nobody can observe it as pending.
    """
    if not isinstance(user_name, str) or not user_name.strip():
        raise InvalidArgument("user_name must be a non-empty string")
    user_name = user_name.strip()

    card = get_card(card_id)
    category = get_category(category_id)
    if card.quiz_id != category.quiz_id:
        raise InvalidArgument(
            f"Card {card.id} and category {category.id} belong to different quizzes"
        )

    sub = Submission(
        user_name=user_name,
        card_id=card.id,
        category_id=category.id,
        timestamp=datetime.utcnow(),
        status=STATUS_PENDING,
    )
    db.session.add(sub)

    # policy value as of this transaction
    if card.quiz.auto_approve:
        _check_transition(sub, STATUS_APPROVED)
        sub.status = STATUS_APPROVED

    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info(
        "Submission id=%s quiz=%s card=%s category=%s status=%s",
        sub.id, card.quiz_id, card.id, category.id, sub.status,
    )
    return sub


def set_submission_status(submission_id, target) -> Submission:
    if target not in TERMINAL_STATUSES:
        raise InvalidArgument(f"Invalid status {target!r}; expected one of {TERMINAL_STATUSES}")

    sub = get_submission(submission_id)
    _check_transition(sub, target)

    # only a row still pending in storage may change
    updated = (
        db.session.query(Submission)
        .filter(Submission.id == sub.id, Submission.status == STATUS_PENDING)
        .update({Submission.status: target}, synchronize_session=False)
    )
    if updated != 1:
        db.session.rollback()
        current = get_submission(submission_id)
        raise InvalidState(f"Submission {current.id} is already {current.status}")

    db.session.commit()
    current_app.logger.info("Submission id=%s -> %s", sub.id, target)
    return sub


def submission_to_dict(sub: Submission) -> dict:
    return {
        "id": sub.id,
        "user_name": sub.user_name,
        "card_id": sub.card_id,
        "category_id": sub.category_id,
        "timestamp": sub.timestamp.isoformat() if sub.timestamp else None,
        "status": sub.status,
    }
