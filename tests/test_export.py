"""Tests for report building, raw snapshots and file serializers."""
import io
import json
from datetime import date, datetime, timedelta

import pandas as pd
import pytest
from sqlalchemy.engine import make_url

from quizmaster.catalog import service as catalog
from quizmaster.errors import InvalidArgument
from quizmaster.export.report import ReportFilters, build_report, export_raw_snapshot
from quizmaster.export.routes import sqlite_database_file
from quizmaster.export.serializers import (
    export_basename,
    rows_to_csv,
    rows_to_json,
    rows_to_xlsx,
)
from quizmaster.extensions import db
from quizmaster.models import Submission
from quizmaster.submissions.service import create_submission, set_submission_status


@pytest.fixture
def two_quizzes(app):
    """'Zoo' is created first but sorts after 'Animals' by name."""
    zoo = catalog.create_quiz('Zoo')
    zoo_card = catalog.create_card(zoo.id, 'Lion')
    zoo_cat = catalog.create_category(zoo.id, 'Terrestres')

    animals = catalog.create_quiz('Animals')
    an_card = catalog.create_card(animals.id, 'Dauphin')
    an_cat = catalog.create_category(animals.id, 'Aquatiques')

    base = datetime(2026, 3, 1, 9, 0, 0)
    subs = {}
    for key, (name, card, cat, minutes, status) in {
        'zoo_late': ('Alice', zoo_card, zoo_cat, 30, 'approved'),
        'zoo_early': ('Bob', zoo_card, zoo_cat, 10, 'approved'),
        'zoo_pending': ('Carol', zoo_card, zoo_cat, 20, None),
        'an_approved': ('Dan', an_card, an_cat, 40, 'approved'),
        'an_rejected': ('Eve', an_card, an_cat, 5, 'rejected'),
    }.items():
        sub = create_submission(name, card.id, cat.id)
        if status:
            set_submission_status(sub.id, status)
        db.session.query(Submission).filter_by(id=sub.id).update(
            {Submission.timestamp: base + timedelta(minutes=minutes)}
        )
        db.session.commit()
        subs[key] = sub.id

    return {'zoo': zoo.id, 'animals': animals.id, 'subs': subs}


class TestBuildReport:

    def test_all_quizzes_approved_only(self, two_quizzes):
        rows = build_report(ReportFilters(quiz_id='all', status_filter='approved-only'))
        s = two_quizzes['subs']

        assert [r['id'] for r in rows] == [s['an_approved'], s['zoo_early'], s['zoo_late']]
        assert all(r['status'] == 'approved' for r in rows)

    def test_no_filter_keeps_every_status(self, two_quizzes):
        rows = build_report(ReportFilters())
        s = two_quizzes['subs']

        assert [r['id'] for r in rows] == [
            s['an_rejected'], s['an_approved'],
            s['zoo_early'], s['zoo_pending'], s['zoo_late'],
        ]

    def test_single_quiz(self, two_quizzes):
        rows = build_report(ReportFilters(quiz_id=two_quizzes['zoo']))
        assert {r['quiz_name'] for r in rows} == {'Zoo'}
        assert len(rows) == 3

    def test_row_shape(self, two_quizzes):
        row = build_report(ReportFilters(quiz_id=two_quizzes['animals'], status_filter='approved'))[0]
        assert row == {
            'id': two_quizzes['subs']['an_approved'],
            'description': 'Dauphin',
            'category': 'Aquatiques',
            'user_name': 'Dan',
            'quiz_name': 'Animals',
            'timestamp': '2026-03-01T09:40:00',
            'status': 'approved',
        }

    def test_unknown_status_filter(self, app):
        with pytest.raises(InvalidArgument):
            build_report(ReportFilters(status_filter='pending-only'))

    def test_from_request_defaults(self):
        assert ReportFilters.from_request(None, None) == ReportFilters('all', 'all')
        assert ReportFilters.from_request('7', 'approved') == ReportFilters(7, 'approved')
        with pytest.raises(InvalidArgument):
            ReportFilters.from_request('seven', None)


class TestRawSnapshot:

    def test_snapshot_ignores_filters(self, two_quizzes):
        snap = export_raw_snapshot()

        assert set(snap) == {'quiz', 'card', 'category', 'submission'}
        assert len(snap['quiz']) == 2
        assert len(snap['submission']) == 5
        statuses = {row['status'] for row in snap['submission']}
        assert statuses == {'approved', 'pending', 'rejected'}
        assert 'progress_cursor' in snap['quiz'][0]


class TestSerializers:

    ROWS = [{
        'id': 1, 'description': 'Orange', 'category': 'Fruit', 'user_name': 'Alice',
        'quiz_name': 'Quiz', 'timestamp': '2026-03-01T09:00:00', 'status': 'approved',
    }]

    def test_basename(self):
        assert export_basename(date(2026, 10, 19)) == 'quiz_export_2026-10-19'

    def test_json(self):
        buf, name, mimetype = rows_to_json(self.ROWS, 'x')
        assert name == 'x.json'
        assert mimetype == 'application/json'
        assert json.loads(buf.getvalue().decode('utf-8')) == self.ROWS

    def test_csv_headers(self):
        buf, name, _ = rows_to_csv(self.ROWS, 'x')
        df = pd.read_csv(io.BytesIO(buf.getvalue()))
        assert name == 'x.csv'
        assert list(df.columns) == ['Description', 'Catégorie', 'Utilisateur', 'Quiz', 'Date', 'Statut']
        assert df.iloc[0]['Description'] == 'Orange'

    def test_xlsx_two_columns(self):
        buf, name, _ = rows_to_xlsx(self.ROWS, 'x')
        df = pd.read_excel(buf, sheet_name='Soumissions', engine='openpyxl')
        assert name == 'x.xlsx'
        assert list(df.columns) == ['description', 'catégorie']
        assert df.iloc[0]['catégorie'] == 'Fruit'


class TestSqliteDatabaseFile:

    def test_relative_path_resolves_under_instance_folder(self, tmp_path):
        (tmp_path / 'quiz.db').write_bytes(b'')
        path = sqlite_database_file(make_url('sqlite:///quiz.db'), str(tmp_path))
        assert path == str(tmp_path / 'quiz.db')

    def test_absolute_path(self, tmp_path):
        db_file = tmp_path / 'abs.db'
        db_file.write_bytes(b'')
        assert sqlite_database_file(make_url(f'sqlite:///{db_file}'), '/elsewhere') == str(db_file)

    def test_no_file(self, tmp_path):
        assert sqlite_database_file(make_url('sqlite://'), str(tmp_path)) is None
        assert sqlite_database_file(make_url('sqlite:///missing.db'), str(tmp_path)) is None
        assert sqlite_database_file(
            make_url('postgresql+psycopg://u:p@localhost/db'), str(tmp_path)
        ) is None
