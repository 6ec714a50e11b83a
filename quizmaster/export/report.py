# quizmaster/export/report.py
"""
Reporting queries.

build_report() is the filtered, denormalized view of submissions.
export_raw_snapshot() is a separate mode: every persisted row of every
table, ignoring all filters. Keep the two apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Union

from sqlalchemy import inspect

from ..catalog.service import coerce_id
from ..errors import InvalidArgument
from ..extensions import db
from ..models import Quiz, Card, Category, Submission, STATUS_APPROVED

ALL_QUIZZES = "all"
STATUS_FILTER_APPROVED = "approved"
STATUS_FILTER_APPROVED_ONLY = "approved-only"
STATUS_FILTER_ALL = "all"

REPORT_COLUMNS = ("id", "description", "category", "user_name", "quiz_name", "timestamp", "status")


@dataclass(frozen=True)
class ReportFilters:
    quiz_id: Union[int, str] = ALL_QUIZZES
    status_filter: str = STATUS_FILTER_ALL

    @classmethod
    def from_request(cls, quiz_id=None, status=None) -> "ReportFilters":
        """Lenient parsing for HTTP params: missing values mean no filter."""
        if quiz_id in (None, "", ALL_QUIZZES):
            quiz_id = ALL_QUIZZES
        else:
            quiz_id = coerce_id(quiz_id, "quiz_id")
        if status in (None, "", STATUS_FILTER_ALL):
            status = STATUS_FILTER_ALL
        return cls(quiz_id=quiz_id, status_filter=status)

    def validate(self) -> None:
        if self.status_filter not in (STATUS_FILTER_APPROVED, STATUS_FILTER_APPROVED_ONLY, STATUS_FILTER_ALL):
            raise InvalidArgument(f"Unknown status filter {self.status_filter!r}")
        if self.quiz_id != ALL_QUIZZES:
            coerce_id(self.quiz_id, "quiz_id")

    @property
    def approved_only(self) -> bool:
        return self.status_filter in (STATUS_FILTER_APPROVED, STATUS_FILTER_APPROVED_ONLY)


def build_report(filters: ReportFilters = ReportFilters()) -> List[Dict[str, Any]]:
    """Rows ordered by quiz name, then submission time (oldest first)."""
    filters.validate()

    q = (
        db.session.query(
            Submission.id,
            Card.text_description,
            Category.name,
            Submission.user_name,
            Quiz.name,
            Submission.timestamp,
            Submission.status,
        )
        .join(Card, Card.id == Submission.card_id)
        .join(Category, Category.id == Submission.category_id)
        .join(Quiz, Quiz.id == Card.quiz_id)
    )

    if filters.quiz_id != ALL_QUIZZES:
        q = q.filter(Quiz.id == coerce_id(filters.quiz_id, "quiz_id"))

    if filters.approved_only:
        q = q.filter(Submission.status == STATUS_APPROVED)

    q = q.order_by(Quiz.name.asc(), Submission.timestamp.asc(), Submission.id.asc())

    return [
        dict(zip(REPORT_COLUMNS, (
            sid, card_text, cat_name, user_name, quiz_name,
            ts.isoformat() if ts else None, status,
        )))
        for sid, card_text, cat_name, user_name, quiz_name, ts, status in q.all()
    ]


def _row_to_dict(obj) -> Dict[str, Any]:
    out = {}
    for col in inspect(obj).mapper.column_attrs:
        val = getattr(obj, col.key)
        out[col.key] = val.isoformat() if hasattr(val, "isoformat") else val
    return out


def export_raw_snapshot() -> Dict[str, List[Dict[str, Any]]]:
    """Full dump of the store, table by table, in primary key order."""
    return {
        model.__tablename__: [_row_to_dict(r) for r in model.query.order_by(model.id.asc()).all()]
        for model in (Quiz, Card, Category, Submission)
    }
