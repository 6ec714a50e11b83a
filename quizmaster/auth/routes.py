# quizmaster/auth/routes.py
from __future__ import annotations

import hmac

from flask import Blueprint, abort, current_app, jsonify
from flask_login import login_user, logout_user

from ..errors import json_payload
from .principal import Moderator

bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _password_ok(password: str) -> bool:
    # Both passwords open both areas; the areas only differ client side.
    accepted = (
        current_app.config["VALIDATION_PASSWORD"],
        current_app.config["ADMIN_PASSWORD"],
    )
    return any(hmac.compare_digest(password.encode(), p.encode()) for p in accepted if p)


@bp.post("/<role>")
def authenticate(role: str):
    if role not in ("validation", "admin"):
        abort(404)

    data = json_payload()
    password = data.get("password")
    if not isinstance(password, str) or not _password_ok(password):
        current_app.logger.warning("Rejected %s login attempt", role)
        abort(401, description="Mot de passe incorrect")

    login_user(Moderator(role))
    return jsonify({"success": True, "role": role})


@bp.post("/logout")
def logout():
    logout_user()
    return jsonify({"success": True})
