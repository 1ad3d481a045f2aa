import os
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Isolate all tests to a throwaway instance + SQLite database
TEST_INSTANCE_DIR = ROOT_DIR / ".pytest-instance"
TEST_INSTANCE_DIR.mkdir(parents=True, exist_ok=True)
TEST_DB_PATH = TEST_INSTANCE_DIR / "test.sqlite"
os.environ["FLASK_ENV"] = "testing"
os.environ["INSTANCE_DIR"] = str(TEST_INSTANCE_DIR)
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH.as_posix()}"

import pytest  # noqa: E402

from app import create_app  # noqa: E402  pylint:disable=wrong-import-position
from config import TestingConfig  # noqa: E402
from extensions import db  # noqa: E402
from models import User  # noqa: E402
from services.tokens import issue_token, settings_from_app  # noqa: E402


@pytest.fixture(scope="session")
def app():
    flask_app = create_app(TestingConfig)
    flask_app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{TEST_DB_PATH.as_posix()}",
    )
    return flask_app


@pytest.fixture
def db_session(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.create_all()
        yield db
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app, db_session):  # noqa: ARG001 - keeps DB initialised for request tests
    return app.test_client()


@pytest.fixture
def create_user(db_session):
    def _create_user(
        *,
        email: str = "user@example.com",
        username: str = "user",
        password: str = "password123",
    ) -> tuple[User, str]:
        user = User(email=email, username=username)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user, password

    return _create_user


@pytest.fixture
def auth_headers(app):
    def _auth_headers(user: User) -> dict[str, str]:
        token = issue_token(user.id, user.email, settings_from_app(app))
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def card_ids(db_session):
    """Twelve catalog cards; returns their ids in pokedex order."""
    from factories import create_cards

    cards = create_cards(12)
    db.session.commit()
    return [card.id for card in cards]
