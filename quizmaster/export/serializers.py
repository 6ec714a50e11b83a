# quizmaster/export/serializers.py
"""Turn report rows into downloadable files. Each returns (buffer, filename, mimetype)."""
from __future__ import annotations

import io
import json
from datetime import date
from typing import Dict, List, Tuple

import pandas as pd

CSV_HEADERS = {
    "description": "Description",
    "category": "Catégorie",
    "user_name": "Utilisateur",
    "quiz_name": "Quiz",
    "timestamp": "Date",
    "status": "Statut",
}

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_basename(today: date | None = None) -> str:
    return f"quiz_export_{(today or date.today()).isoformat()}"


def rows_to_json(rows: List[Dict], basename: str) -> Tuple[io.BytesIO, str, str]:
    buf = io.BytesIO(json.dumps(rows, indent=2, ensure_ascii=False).encode("utf-8"))
    return buf, f"{basename}.json", "application/json"


def rows_to_csv(rows: List[Dict], basename: str) -> Tuple[io.BytesIO, str, str]:
    df = pd.DataFrame(rows, columns=list(CSV_HEADERS)).rename(columns=CSV_HEADERS)
    buf = io.BytesIO(df.to_csv(index=False).encode("utf-8"))
    return buf, f"{basename}.csv", "text/csv"


def rows_to_xlsx(rows: List[Dict], basename: str) -> Tuple[io.BytesIO, str, str]:
    # spreadsheet export only carries the classification itself
    df = pd.DataFrame(
        [{"description": r["description"], "catégorie": r["category"]} for r in rows],
        columns=["description", "catégorie"],
    )
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Soumissions", index=False)
    buf.seek(0)
    return buf, f"{basename}.xlsx", XLSX_MIMETYPE


def snapshot_to_json(snapshot: Dict[str, List[Dict]], basename: str) -> Tuple[io.BytesIO, str, str]:
    buf = io.BytesIO(json.dumps(snapshot, indent=2, ensure_ascii=False).encode("utf-8"))
    return buf, f"{basename}_snapshot.json", "application/json"


ROW_SERIALIZERS = {
    "json": rows_to_json,
    "csv": rows_to_csv,
    "xlsx": rows_to_xlsx,
}
