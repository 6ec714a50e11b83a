import os

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DEFAULT_DATABASE_PATH = os.path.join(BASE_DIR, "instance", "quiz_master.db")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        f"sqlite:///{DEFAULT_DATABASE_PATH}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Static moderation gate. Either password opens both areas.
    VALIDATION_PASSWORD = os.getenv("VALIDATION_PASSWORD", "validation123")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Ensure the default database directory exists when the app starts
    os.makedirs(os.path.dirname(DEFAULT_DATABASE_PATH), exist_ok=True)
