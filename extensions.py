"""TCG backend: shared Flask extension instances.
=================================================
This module centralizes third-party Flask extensions so they can be imported
without causing circular dependencies. Import **only** from here in app code:
    from extensions import db, login_manager

Why this exists
---------------
- Keeps a single SQLAlchemy() instance across the app.
- Applies a stable naming convention so Alembic migrations produce deterministic
  constraint/index names.
- Holds the LoginManager that turns bearer tokens into ``current_user``.

Do **not** import the application here. Extensions are initialized by `create_app`
via `ext.init_app(app)`.
"""
from __future__ import annotations

from flask_cors import CORS
from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Stable names for constraints/indexes so Alembic migrations are predictable
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Attach the naming convention to SQLAlchemy's MetaData
metadata = MetaData(naming_convention=NAMING_CONVENTION)

# Core extensions (initialized in app factory)
db: SQLAlchemy = SQLAlchemy(metadata=metadata)
migrate: Migrate = Migrate()
cors: CORS = CORS()
login_manager: LoginManager = LoginManager()

__all__ = ["db", "migrate", "cors", "login_manager", "NAMING_CONVENTION", "metadata"]
