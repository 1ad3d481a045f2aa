"""Stateless session tokens (JWT).

Tokens carry ``userId`` and ``email`` claims and expire after the configured
lifetime (7 days by default). The signing secret is never read from a module
global: callers pass a :class:`TokenSettings`, normally built from the app
config with :func:`settings_from_app`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from flask import current_app
from flask_login import UserMixin

from shared.exceptions import InvalidToken

DEFAULT_EXPIRES_IN = 7 * 24 * 60 * 60


@dataclass(frozen=True)
class TokenSettings:
    secret: str
    algorithm: str = "HS256"
    expires_in: int = DEFAULT_EXPIRES_IN


class TokenIdentity(UserMixin):
    """Decoded session identity exposed as ``current_user`` on protected routes."""

    def __init__(self, user_id: int, email: str):
        self.id = user_id
        self.email = email

    @property
    def user_id(self) -> int:
        return self.id

    def __repr__(self):
        return f"<TokenIdentity {self.id} {self.email}>"


def settings_from_app(app=None) -> TokenSettings:
    app = app or current_app
    return TokenSettings(
        secret=app.config["JWT_SECRET_KEY"],
        algorithm=app.config.get("JWT_ALGORITHM", "HS256"),
        expires_in=int(app.config.get("JWT_EXPIRES_IN", DEFAULT_EXPIRES_IN)),
    )


def issue_token(
    user_id: int,
    email: str,
    settings: TokenSettings,
    *,
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "userId": int(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=settings.expires_in),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def decode_token(token: str, settings: TokenSettings) -> TokenIdentity:
    """Verify signature and expiry; any failure is an :class:`InvalidToken`."""
    try:
        claims = jwt.decode(
            token,
            settings.secret,
            algorithms=[settings.algorithm],
            options={"require": ["exp", "iat"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken() from exc

    user_id = claims.get("userId")
    email = claims.get("email")
    if isinstance(user_id, bool) or not isinstance(user_id, int) or not isinstance(email, str):
        raise InvalidToken()
    return TokenIdentity(user_id, email)


def extract_bearer_token(auth_header: str | None) -> Optional[str]:
    """Pull the token out of an ``Authorization: Bearer <token>`` header."""
    if not auth_header:
        return None
    scheme, _, value = auth_header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return value.strip() or None
