# quizmaster/submissions/moderation.py
"""
Moderator review queue.

Pending submissions are bucketed by category *name*, not id: two quizzes
with a "Fruit" category share one bucket unless the caller passes quiz_id.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from flask import current_app

from ..catalog.service import coerce_id
from ..errors import QuizError
from ..extensions import db
from ..models import (
    Card,
    Category,
    Submission,
    STATUS_PENDING,
    STATUS_APPROVED,
    STATUS_REJECTED,
)
from .service import set_submission_status


@dataclass
class ApprovalBatch:
    approved: List[int] = field(default_factory=list)
    failed: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "approved": self.approved,
            "failed": [{"id": sid, "error": kind} for sid, kind in self.failed],
            "complete": self.complete,
        }


def _pending_query(quiz_id: Optional[int] = None):
    q = (
        db.session.query(
            Submission.id,
            Submission.user_name,
            Submission.timestamp,
            Submission.status,
            Card.text_description,
            Category.name,
            Category.id,
            Card.quiz_id,
        )
        .join(Card, Card.id == Submission.card_id)
        .join(Category, Category.id == Submission.category_id)
        .filter(Submission.status == STATUS_PENDING)
    )
    if quiz_id is not None:
        q = q.filter(Card.quiz_id == coerce_id(quiz_id, "quiz_id"))
    return q


def list_pending(quiz_id: Optional[int] = None) -> Dict[str, List[dict]]:
    """category name -> pending submissions, oldest first."""
    rows = (
        _pending_query(quiz_id)
        .order_by(Category.name.asc(), Submission.timestamp.asc(), Submission.id.asc())
        .all()
    )

    grouped: Dict[str, List[dict]] = {}
    for sid, user_name, ts, status, card_text, cat_name, cat_id, q_id in rows:
        grouped.setdefault(cat_name, []).append({
            "id": sid,
            "user_name": user_name,
            "timestamp": ts.isoformat() if ts else None,
            "status": status,
            "card_description": card_text,
            "category_name": cat_name,
            "category_id": cat_id,
            "quiz_id": q_id,
        })
    return grouped


def approve_all(quiz_id: Optional[int] = None) -> ApprovalBatch:
    """
    Approve every pending submission, one transition at a time.

    Not atomic: a failure leaves earlier rows approved and later ones pending.
    Call again to pick up whatever is still pending.
    """
    ids = [
        sid for (sid,) in
        _pending_query(quiz_id)
        .with_entities(Submission.id)
        .order_by(Submission.timestamp.asc(), Submission.id.asc())
        .all()
    ]

    batch = ApprovalBatch()
    for sid in ids:
        try:
            set_submission_status(sid, STATUS_APPROVED)
        except QuizError as err:
            db.session.rollback()
            current_app.logger.warning("approve_all: submission id=%s skipped (%s)", sid, err.message)
            batch.failed.append((sid, err.kind))
            continue
        batch.approved.append(sid)

    current_app.logger.info(
        "approve_all: approved=%s failed=%s", len(batch.approved), len(batch.failed)
    )
    return batch


def reject_one(submission_id) -> Submission:
    return set_submission_status(submission_id, STATUS_REJECTED)
