from dotenv import load_dotenv
load_dotenv()

import logging

from flask import Flask, abort
from flask.logging import default_handler
from sqlalchemy import event
from sqlalchemy.engine import Engine

from .config import Config
from .extensions import db, migrate, login_manager, enable_sqlite_foreign_keys
from .errors import register_error_handlers
from .auth.principal import Moderator


@login_manager.user_loader
def load_user(user_id):
    return Moderator.from_id(user_id)


@login_manager.unauthorized_handler
def unauthorized():
    abort(401, description="Authentication required")


def configure_logging(app: Flask) -> None:
    """Replace Flask's default handler with one formatted handler (once per process)."""
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    app.logger.removeHandler(default_handler)
    if any(h.get_name() == "quizmaster" for h in app.logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name("quizmaster")
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    app.logger.addHandler(handler)
    app.logger.propagate = False


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    if not event.contains(Engine, "connect", enable_sqlite_foreign_keys):
        event.listen(Engine, "connect", enable_sqlite_foreign_keys)

    # import models so Alembic sees them
    from . import models  # noqa: F401

    register_error_handlers(app)

    # register blueprints
    from .auth.routes import bp as auth_bp
    from .catalog.routes import quiz_bp, cards_bp, categories_bp
    from .progress.routes import bp as progress_bp
    from .submissions.routes import bp as submissions_bp
    from .export.routes import bp as export_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(quiz_bp)
    app.register_blueprint(cards_bp)
    app.register_blueprint(categories_bp)
    app.register_blueprint(progress_bp)
    app.register_blueprint(submissions_bp)
    app.register_blueprint(export_bp)

    from .catalog.cli import register_cli
    register_cli(app)

    return app
