# quizmaster/errors.py
"""
Error taxonomy shared by every service.

Services raise these; the HTTP layer maps them to status codes:
NotFound -> 404, InvalidArgument -> 400, InvalidState -> 409.
"""
from __future__ import annotations

from flask import jsonify, request
from werkzeug.exceptions import HTTPException


class QuizError(Exception):
    kind = "error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(QuizError):
    kind = "not_found"
    status_code = 404


class InvalidArgument(QuizError):
    kind = "invalid_argument"
    status_code = 400


class InvalidState(QuizError):
    kind = "invalid_state"
    status_code = 409


def json_payload() -> dict:
    """Request body as a dict. Missing or unparsable bodies count as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgument("JSON object expected")
    return data


def register_error_handlers(app):
    @app.errorhandler(QuizError)
    def handle_quiz_error(err: QuizError):
        return jsonify({"error": err.kind, "message": err.message}), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err: HTTPException):
        # keep HTML error pages for anything outside the JSON API
        if not request.path.startswith("/api/"):
            return err
        return jsonify({"error": err.name.lower().replace(" ", "_"), "message": err.description}), err.code
