# quizmaster/catalog/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify
from flask_login import login_required

from ..errors import json_payload
from . import service
from .service import quiz_to_dict, card_to_dict, category_to_dict

quiz_bp = Blueprint("quiz", __name__, url_prefix="/api/quiz")
cards_bp = Blueprint("cards", __name__, url_prefix="/api/cards")
categories_bp = Blueprint("categories", __name__, url_prefix="/api/categories")


# ---- quizzes ----

@quiz_bp.get("/active")
def active_quizzes():
    return jsonify({"quizzes": [quiz_to_dict(q) for q in service.list_quizzes(active_only=True)]})


@quiz_bp.get("/all")
@login_required
def all_quizzes():
    return jsonify({"quizzes": [quiz_to_dict(q) for q in service.list_quizzes()]})


@quiz_bp.get("/<int:quiz_id>")
def quiz_detail(quiz_id: int):
    quiz, cards, categories = service.get_quiz_bundle(quiz_id)
    return jsonify({
        "quiz": quiz_to_dict(quiz),
        "cards": [card_to_dict(c) for c in cards],
        "categories": [category_to_dict(c) for c in categories],
    })


@quiz_bp.post("")
@login_required
def create_quiz():
    data = json_payload()
    quiz = service.create_quiz(
        data.get("name"),
        data.get("description"),
        active=data.get("is_active", True),
        auto_approve=data.get("auto_approve", False),
    )
    return jsonify(quiz_to_dict(quiz)), 201


@quiz_bp.put("/<int:quiz_id>")
@login_required
def update_quiz(quiz_id: int):
    data = json_payload()
    quiz = service.update_quiz(
        quiz_id,
        name=data.get("name"),
        description=data.get("description"),
        active=data.get("is_active"),
    )
    return jsonify(quiz_to_dict(quiz))


@quiz_bp.patch("/<int:quiz_id>/toggle")
@login_required
def toggle_quiz(quiz_id: int):
    return jsonify(quiz_to_dict(service.toggle_quiz_active(quiz_id)))


@quiz_bp.delete("/<int:quiz_id>")
@login_required
def delete_quiz(quiz_id: int):
    service.delete_quiz(quiz_id)
    return jsonify({"message": "Quiz deleted successfully"})


# ---- cards ----

@cards_bp.get("/quiz/<int:quiz_id>")
def quiz_cards(quiz_id: int):
    return jsonify({"cards": [card_to_dict(c) for c in service.list_cards(quiz_id)]})


@cards_bp.post("")
@login_required
def create_card():
    data = json_payload()
    card = service.create_card(data.get("quiz_id"), data.get("text_description"))
    return jsonify(card_to_dict(card)), 201


@cards_bp.put("/<int:card_id>")
@login_required
def update_card(card_id: int):
    card = service.update_card(card_id, json_payload().get("text_description"))
    return jsonify(card_to_dict(card))


@cards_bp.delete("/<int:card_id>")
@login_required
def delete_card(card_id: int):
    service.delete_card(card_id)
    return jsonify({"message": "Card deleted successfully"})


# ---- categories ----

@categories_bp.get("/quiz/<int:quiz_id>")
def quiz_categories(quiz_id: int):
    return jsonify({"categories": [category_to_dict(c) for c in service.list_categories(quiz_id)]})


@categories_bp.post("")
@login_required
def create_category():
    data = json_payload()
    category = service.create_category(data.get("quiz_id"), data.get("name"))
    return jsonify(category_to_dict(category)), 201


@categories_bp.put("/<int:category_id>")
@login_required
def update_category(category_id: int):
    category = service.update_category(category_id, json_payload().get("name"))
    return jsonify(category_to_dict(category))


@categories_bp.delete("/<int:category_id>")
@login_required
def delete_category(category_id: int):
    service.delete_category(category_id)
    return jsonify({"message": "Category deleted successfully"})
