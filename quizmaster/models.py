from datetime import datetime
from .extensions import db

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"

SUBMISSION_STATUSES = (STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED)
TERMINAL_STATUSES = (STATUS_APPROVED, STATUS_REJECTED)


class Quiz(db.Model):
    __tablename__ = "quiz"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    description = db.Column(db.Text)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    auto_approve = db.Column(db.Boolean, default=False, nullable=False)
    # shared "current card" for every player of this quiz
    progress_cursor = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    cards = db.relationship(
        "Card", backref="quiz", cascade="all, delete-orphan",
        order_by="Card.id",
    )
    categories = db.relationship(
        "Category", backref="quiz", cascade="all, delete-orphan",
        order_by="Category.id",
    )


class Card(db.Model):
    __tablename__ = "card"
    id = db.Column(db.Integer, primary_key=True)
    text_description = db.Column(db.Text, nullable=False)
    quiz_id = db.Column(
        db.Integer, db.ForeignKey("quiz.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    submissions = db.relationship(
        "Submission", backref="card", cascade="all, delete-orphan",
    )


class Category(db.Model):
    __tablename__ = "category"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String, nullable=False)
    quiz_id = db.Column(
        db.Integer, db.ForeignKey("quiz.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    submissions = db.relationship(
        "Submission", backref="category", cascade="all, delete-orphan",
    )


class Submission(db.Model):
    __tablename__ = "submission"
    __table_args__ = (
        db.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')", name="ck_submission_status"
        ),
    )
    id = db.Column(db.Integer, primary_key=True)
    user_name = db.Column(db.String, nullable=False)
    card_id = db.Column(
        db.Integer, db.ForeignKey("card.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id = db.Column(
        db.Integer, db.ForeignKey("category.id", ondelete="CASCADE"), nullable=False, index=True
    )
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    status = db.Column(db.String, default=STATUS_PENDING, nullable=False, index=True)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES
