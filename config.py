from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Absolute project dir
BASE_DIR = Path(__file__).resolve().parent
# Absolute instance dir (defaults to <project>/instance)
INSTANCE_DIR = Path(os.getenv("INSTANCE_DIR", BASE_DIR / "instance")).resolve()

_TRUTHY = {"1", "true", "yes", "on"}


class BaseConfig:
    # Flask basics
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")  # override in prod!
    JSON_SORT_KEYS = False

    # Database (absolute sqlite path; forward slashes are fine on Windows)
    DEFAULT_SQLITE = f"sqlite:///{(INSTANCE_DIR / 'database.db').as_posix()}"
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", DEFAULT_SQLITE)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session tokens (JWT). The signing secret falls back to SECRET_KEY.
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY") or SECRET_KEY
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_IN = int(os.getenv("JWT_EXPIRES_IN", 7 * 24 * 60 * 60))  # 7 days

    # Werkzeug password hashing (salted, deliberately slow)
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE = os.getenv("LOG_TO_FILE", "0").lower() in _TRUTHY

    # CORS: "*" or a comma-separated list of origins
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Uploads / responses
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", 1 * 1024 * 1024))


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class ProductionConfig(BaseConfig):
    DEBUG = False
    LOG_TO_FILE = os.getenv("LOG_TO_FILE", "1").lower() in _TRUTHY


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-0123456789abcdef0123456789"
    # pbkdf2 keeps the suite fast; production keeps the slow default.
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_TO_FILE = False


def _select_config():
    env = os.getenv("FLASK_ENV")
    if env == "development":
        return DevelopmentConfig
    if env == "testing":
        return TestingConfig
    secret = os.getenv("SECRET_KEY", "dev")
    if not secret or secret == "dev":
        raise RuntimeError("SECRET_KEY must be set to a non-default value in production.")
    return ProductionConfig


def get_config():
    """Resolve the config class for the current environment."""
    return _select_config()
