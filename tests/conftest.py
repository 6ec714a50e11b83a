import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from quizmaster import create_app
from quizmaster.config import Config
from quizmaster.extensions import db
from quizmaster.catalog import service as catalog


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    VALIDATION_PASSWORD = 'validation-test'
    ADMIN_PASSWORD = 'admin-test'
    LOG_LEVEL = 'WARNING'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def moderator_client(app):
    client = app.test_client()
    resp = client.post('/api/auth/validation', json={'password': 'validation-test'})
    assert resp.status_code == 200
    return client


@pytest.fixture
def sample_quiz(app):
    """Quiz Q: cards A, B; categories X, Y; auto-approval off."""
    quiz = catalog.create_quiz('Quiz Q', 'sample')
    card_a = catalog.create_card(quiz.id, 'A')
    card_b = catalog.create_card(quiz.id, 'B')
    cat_x = catalog.create_category(quiz.id, 'X')
    cat_y = catalog.create_category(quiz.id, 'Y')
    return {
        'quiz': quiz.id,
        'A': card_a.id,
        'B': card_b.id,
        'X': cat_x.id,
        'Y': cat_y.id,
    }


@pytest.fixture
def auto_quiz(app):
    """Quiz Q2 with auto-approval on."""
    quiz = catalog.create_quiz('Quiz Q2', auto_approve=True)
    card_a = catalog.create_card(quiz.id, 'A')
    cat_y = catalog.create_category(quiz.id, 'Y')
    return {'quiz': quiz.id, 'A': card_a.id, 'Y': cat_y.id}
