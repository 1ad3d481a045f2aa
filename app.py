"""Flask application factory, CLI entry points, and database bootstrap."""

import logging
import os
import sqlite3
import uuid
from pathlib import Path

import click
from flask import Flask, g, jsonify, request
from sqlalchemy import event
from sqlalchemy.engine import Engine

from config import INSTANCE_DIR as CONFIG_INSTANCE_DIR, get_config
from extensions import cors, db, login_manager, migrate
from shared.exceptions import InvalidToken, Unauthenticated
from shared.error_handlers import register_error_handlers
from shared.logging import configure_logging

logger = logging.getLogger(__name__)

# Single SQLite PRAGMA hook (avoid duplicate listeners)
_SQLITE_PRAGMA_STATEMENTS = (
    "PRAGMA foreign_keys=ON;",
    "PRAGMA journal_mode=WAL;",
    "PRAGMA synchronous=NORMAL;",
)


def _apply_sqlite_pragmas(dbapi_connection) -> None:
    """Execute the configured PRAGMAs if this is a SQLite connection."""
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cur = dbapi_connection.cursor()
    try:
        for statement in _SQLITE_PRAGMA_STATEMENTS:
            cur.execute(statement)
    finally:
        cur.close()


@event.listens_for(Engine, "connect")
def _sqlite_pragmas(dbapi_connection, _) -> None:
    """Enforce foreign keys (deck cascades) each time SQLite opens a connection."""
    _apply_sqlite_pragmas(dbapi_connection)


def _configure_login_manager(app: Flask) -> None:
    """Bind Flask-Login to stateless bearer tokens; no server-side session is used."""
    from services.tokens import decode_token, extract_bearer_token, settings_from_app

    login_manager.init_app(app)
    login_manager.session_protection = None

    @login_manager.request_loader
    def _load_identity_from_request(req):
        token = extract_bearer_token(req.headers.get("Authorization"))
        if not token:
            g.auth_failure = Unauthenticated()
            return None
        try:
            return decode_token(token, settings_from_app(app))
        except InvalidToken as exc:
            g.auth_failure = exc
            return None

    @login_manager.unauthorized_handler
    def _unauthorized():
        failure = g.get("auth_failure") or Unauthenticated()
        logger.warning("Rejected request to %s: %s", request.path, failure.message)
        return jsonify({"error": failure.message}), failure.status_code


# ---------------------------------------------------------------------------
# Extension bootstrap helpers
# ---------------------------------------------------------------------------

def _safe_init_sqlalchemy(app: Flask):
    """Initialise SQLAlchemy only if it has not been bound yet."""
    if not getattr(app, "extensions", None) or "sqlalchemy" not in app.extensions:
        db.init_app(app)


def _safe_init_migrate(app: Flask):
    """Bind Flask-Migrate, using batch mode so SQLite ALTERs work."""
    if not getattr(app, "extensions", None) or "migrate" not in app.extensions:
        migrate.init_app(app, db, render_as_batch=True)


def _init_cors(app: Flask):
    origins = app.config.get("CORS_ORIGINS") or "*"
    if isinstance(origins, str) and origins != "*":
        origins = [origin.strip() for origin in origins.split(",") if origin.strip()]
    cors.init_app(app, resources={r"/api/*": {"origins": origins}}, supports_credentials=True)


def _register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    def init_db_cmd():
        """Create all tables for the configured database."""
        import models  # noqa: F401  (register mappers)

        db.create_all()
        click.echo(f"Database ready at {app.config['SQLALCHEMY_DATABASE_URI']}")

    @app.cli.command("seed")
    @click.option(
        "--data",
        "data_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Card list JSON (defaults to seeds/data/pokemon.json).",
    )
    @click.option("--reset/--no-reset", default=True, show_default=True,
                  help="Delete existing users, cards and decks first.")
    def seed_cmd(data_path, reset):
        """Load the card catalog, demo users and their starter decks."""
        from seeds.seed_demo import DEFAULT_CARD_FILE, seed_all

        path = (data_path or DEFAULT_CARD_FILE).expanduser().resolve()
        if not path.exists():
            raise click.ClickException(f"File not found: {path}")
        db.create_all()
        try:
            summary = seed_all(path, reset=reset)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(
            f"Seeded {summary['cards']} card(s), {summary['users']} user(s), "
            f"{summary['decks']} starter deck(s)"
        )


def create_app(config_object=None):
    """Create, configure, and return a fully-initialised Flask app."""
    app = Flask(
        __name__,
        instance_path=str(CONFIG_INSTANCE_DIR),
        instance_relative_config=False,
    )
    app.config.from_object(config_object or get_config())
    os.makedirs(app.instance_path, exist_ok=True)
    configure_logging(app)

    if app.config.get("JWT_SECRET_KEY") in (None, "", "dev") and not (app.debug or app.testing):
        raise RuntimeError("JWT_SECRET_KEY must be set to a non-default value in production.")

    # --- Core extensions ---
    _safe_init_sqlalchemy(app)
    _safe_init_migrate(app)
    _init_cors(app)
    _configure_login_manager(app)
    register_error_handlers(app)

    # Blueprints
    from routes import register_blueprints
    register_blueprints(app)

    _register_cli(app)

    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex

    @app.after_request
    def attach_request_id(resp):
        rid = getattr(g, "request_id", None)
        if rid:
            resp.headers.setdefault("X-Request-ID", rid)
        return resp

    @app.after_request
    def security_headers(resp):
        """Attach a minimal set of security-related HTTP headers to each response."""
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        return resp

    return app


if __name__ == "__main__":
    _app = create_app()
    _app.run(host="127.0.0.1", port=int(os.getenv("PORT", "3000")), debug=_app.debug)
