# quizmaster/progress/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify
from flask_login import login_required

from ..errors import json_payload
from .service import get_progress, set_progress, reset_progress
from ..submissions.policy import get_auto_approve, set_auto_approve

bp = Blueprint("progress", __name__, url_prefix="/api/quiz")


@bp.get("/<int:quiz_id>/progress")
def read_progress(quiz_id: int):
    return jsonify({"quiz_id": quiz_id, "index": get_progress(quiz_id)})


@bp.put("/<int:quiz_id>/progress")
def write_progress(quiz_id: int):
    data = json_payload()
    index = set_progress(quiz_id, data.get("index"))
    return jsonify({"quiz_id": quiz_id, "index": index})


@bp.post("/<int:quiz_id>/progress/reset")
def restart(quiz_id: int):
    return jsonify({"quiz_id": quiz_id, "index": reset_progress(quiz_id)})


@bp.get("/<int:quiz_id>/auto-approve")
def read_auto_approve(quiz_id: int):
    return jsonify({"quiz_id": quiz_id, "auto_approve": get_auto_approve(quiz_id)})


@bp.put("/<int:quiz_id>/auto-approve")
@login_required
def write_auto_approve(quiz_id: int):
    data = json_payload()
    value = set_auto_approve(quiz_id, data.get("auto_approve"))
    return jsonify({"quiz_id": quiz_id, "auto_approve": value})
