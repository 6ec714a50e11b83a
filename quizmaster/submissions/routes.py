# quizmaster/submissions/routes.py
from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import login_required

from ..errors import json_payload
from .service import create_submission, get_submission, set_submission_status, submission_to_dict
from .moderation import list_pending, approve_all, reject_one
from ..export.report import ReportFilters, build_report

bp = Blueprint("submissions", __name__, url_prefix="/api/submissions")


def _optional_quiz_id():
    raw = request.args.get("quiz_id")
    return None if raw in (None, "", "all") else raw


@bp.post("")
def submit_answer():
    data = json_payload()
    sub = create_submission(data.get("user_name"), data.get("card_id"), data.get("category_id"))
    return jsonify(submission_to_dict(sub)), 201


@bp.get("/<int:submission_id>")
def submission_detail(submission_id: int):
    return jsonify(submission_to_dict(get_submission(submission_id)))


@bp.get("/pending")
@login_required
def pending():
    return jsonify({"submissions": list_pending(_optional_quiz_id())})


@bp.patch("/<int:submission_id>/status")
@login_required
def update_status(submission_id: int):
    data = json_payload()
    sub = set_submission_status(submission_id, data.get("status"))
    return jsonify(submission_to_dict(sub))


@bp.post("/approve-all")
@login_required
def approve_pending():
    batch = approve_all(_optional_quiz_id())
    return jsonify(batch.to_dict())


@bp.post("/<int:submission_id>/reject")
@login_required
def reject(submission_id: int):
    return jsonify(submission_to_dict(reject_one(submission_id)))


@bp.get("/export")
@login_required
def export_rows():
    filters = ReportFilters.from_request(request.args.get("quiz_id"), request.args.get("status"))
    return jsonify({"submissions": build_report(filters)})
