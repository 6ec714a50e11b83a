# quizmaster/catalog/service.py
from __future__ import annotations

from typing import List, Optional, Tuple

from flask import current_app

from ..errors import InvalidArgument, NotFound
from ..extensions import db
from ..models import Quiz, Card, Category


def _clean_text(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} must be a non-empty string")
    return value.strip()


def coerce_id(value, field: str) -> int:
    # bool is an int subclass; floats are never truncated into ids
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise InvalidArgument(f"{field} must be an integer id")


def require_bool(value, field: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgument(f"{field} must be a boolean")
    return value


def _clean_description(value) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise InvalidArgument("description must be a string")
    return value


def get_quiz(quiz_id) -> Quiz:
    quiz = db.session.get(Quiz, coerce_id(quiz_id, "quiz_id"))
    if quiz is None:
        raise NotFound(f"Quiz {quiz_id} not found")
    return quiz


def get_card(card_id) -> Card:
    card = db.session.get(Card, coerce_id(card_id, "card_id"))
    if card is None:
        raise NotFound(f"Card {card_id} not found")
    return card


def get_category(category_id) -> Category:
    category = db.session.get(Category, coerce_id(category_id, "category_id"))
    if category is None:
        raise NotFound(f"Category {category_id} not found")
    return category


# ---- quizzes ----

def list_quizzes(active_only: bool = False) -> List[Quiz]:
    q = Quiz.query
    if active_only:
        q = q.filter(Quiz.is_active.is_(True))
    return q.order_by(Quiz.created_at.desc(), Quiz.id.desc()).all()


def get_quiz_bundle(quiz_id) -> Tuple[Quiz, List[Card], List[Category]]:
    """Quiz with its cards and categories, both ordered by id."""
    quiz = get_quiz(quiz_id)
    cards = Card.query.filter_by(quiz_id=quiz.id).order_by(Card.id.asc()).all()
    categories = Category.query.filter_by(quiz_id=quiz.id).order_by(Category.id.asc()).all()
    return quiz, cards, categories


def create_quiz(
    name,
    description: Optional[str] = None,
    *,
    active: bool = True,
    auto_approve: bool = False,
) -> Quiz:
    quiz = Quiz(
        name=_clean_text(name, "name"),
        description=_clean_description(description),
        is_active=require_bool(active, "is_active"),
        auto_approve=require_bool(auto_approve, "auto_approve"),
        progress_cursor=0,
    )
    db.session.add(quiz)
    db.session.commit()
    current_app.logger.info("Created quiz id=%s name=%r", quiz.id, quiz.name)
    return quiz


def update_quiz(quiz_id, *, name=None, description=None, active=None) -> Quiz:
    quiz = get_quiz(quiz_id)
    if name is not None:
        quiz.name = _clean_text(name, "name")
    if description is not None:
        quiz.description = _clean_description(description)
    if active is not None:
        quiz.is_active = require_bool(active, "is_active")
    db.session.commit()
    return quiz


def toggle_quiz_active(quiz_id) -> Quiz:
    quiz = get_quiz(quiz_id)
    quiz.is_active = not quiz.is_active
    db.session.commit()
    current_app.logger.info("Quiz id=%s active=%s", quiz.id, quiz.is_active)
    return quiz


def delete_quiz(quiz_id) -> None:
    """Removes the quiz with its cards, categories and their submissions."""
    quiz = get_quiz(quiz_id)
    db.session.delete(quiz)
    db.session.commit()
    current_app.logger.info("Deleted quiz id=%s", quiz_id)


# ---- cards ----

def list_cards(quiz_id) -> List[Card]:
    quiz = get_quiz(quiz_id)
    return Card.query.filter_by(quiz_id=quiz.id).order_by(Card.id.asc()).all()


def create_card(quiz_id, text_description) -> Card:
    quiz = get_quiz(quiz_id)
    card = Card(text_description=_clean_text(text_description, "text_description"), quiz_id=quiz.id)
    db.session.add(card)
    db.session.commit()
    return card


def update_card(card_id, text_description) -> Card:
    card = get_card(card_id)
    card.text_description = _clean_text(text_description, "text_description")
    db.session.commit()
    return card


def delete_card(card_id) -> None:
    card = get_card(card_id)
    db.session.delete(card)
    db.session.commit()
    current_app.logger.info("Deleted card id=%s", card_id)


# ---- categories ----

def list_categories(quiz_id) -> List[Category]:
    quiz = get_quiz(quiz_id)
    return Category.query.filter_by(quiz_id=quiz.id).order_by(Category.id.asc()).all()


def create_category(quiz_id, name) -> Category:
    quiz = get_quiz(quiz_id)
    category = Category(name=_clean_text(name, "name"), quiz_id=quiz.id)
    db.session.add(category)
    db.session.commit()
    return category


def update_category(category_id, name) -> Category:
    category = get_category(category_id)
    category.name = _clean_text(name, "name")
    db.session.commit()
    return category


def delete_category(category_id) -> None:
    category = get_category(category_id)
    db.session.delete(category)
    db.session.commit()
    current_app.logger.info("Deleted category id=%s", category_id)


# ---- serialization ----

def quiz_to_dict(quiz: Quiz) -> dict:
    return {
        "id": quiz.id,
        "name": quiz.name,
        "description": quiz.description,
        "is_active": bool(quiz.is_active),
        "auto_approve": bool(quiz.auto_approve),
        "progress_cursor": int(quiz.progress_cursor or 0),
        "created_at": quiz.created_at.isoformat() if quiz.created_at else None,
    }


def card_to_dict(card: Card) -> dict:
    return {"id": card.id, "text_description": card.text_description, "quiz_id": card.quiz_id}


def category_to_dict(category: Category) -> dict:
    return {"id": category.id, "name": category.name, "quiz_id": category.quiz_id}
