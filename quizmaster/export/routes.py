# quizmaster/export/routes.py
from __future__ import annotations

import os
from datetime import date
from typing import Optional

from flask import Blueprint, current_app, jsonify, send_file
from flask_login import login_required

from ..errors import InvalidArgument, json_payload
from ..extensions import db
from .report import ReportFilters, build_report, export_raw_snapshot
from .serializers import ROW_SERIALIZERS, export_basename, snapshot_to_json

bp = Blueprint("export", __name__, url_prefix="/api/export")

RAW_SNAPSHOT_FORMAT = "sqlite"


def sqlite_database_file(url, instance_path: str) -> Optional[str]:
    """Absolute path of a SQLite database file, or None when there is no file."""
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return None
    # relative paths live under the instance folder, as Flask-SQLAlchemy resolves them
    path = url.database if os.path.isabs(url.database) else os.path.join(instance_path, url.database)
    return path if os.path.isfile(path) else None


@bp.post("/data")
@login_required
def export_data():
    data = json_payload()
    fmt = data.get("format")
    basename = export_basename(date.today())

    if fmt == RAW_SNAPSHOT_FORMAT:
        # Raw mode: the whole store, filters deliberately ignored.
        path = sqlite_database_file(db.engine.url, current_app.instance_path)
        current_app.logger.info("Raw snapshot export (file=%s)", bool(path))
        if path:
            return send_file(
                path,
                as_attachment=True,
                download_name=f"quiz_master_{date.today().isoformat()}.db",
                mimetype="application/vnd.sqlite3",
            )
        buf, filename, mimetype = snapshot_to_json(export_raw_snapshot(), basename)
        return send_file(buf, as_attachment=True, download_name=filename, mimetype=mimetype)

    serializer = ROW_SERIALIZERS.get(fmt)
    if serializer is None:
        raise InvalidArgument("Format non supporté")

    filters = ReportFilters.from_request(data.get("quiz_id"), data.get("status"))
    rows = build_report(filters)
    current_app.logger.info("Export format=%s filters=%s rows=%s", fmt, filters, len(rows))

    buf, filename, mimetype = serializer(rows, basename)
    return send_file(buf, as_attachment=True, download_name=filename, mimetype=mimetype)


@bp.get("/snapshot")
@login_required
def snapshot():
    return jsonify(export_raw_snapshot())
