"""Account sign-up / sign-in."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from extensions import db
from models import User
from shared.exceptions import Conflict, Unauthorized, ValidationError
from shared.validation import clean_text

from .tokens import TokenSettings, issue_token

logger = logging.getLogger(__name__)

SIGN_UP_REQUIRED = "Email, username, and password are required"
SIGN_IN_REQUIRED = "Email and password are required"
EMAIL_TAKEN = "Email already in use"


@dataclass
class AuthResult:
    token: str
    user: User


def _find_by_email(email: str) -> User | None:
    return User.query.filter_by(email=email).first()


def sign_up(email, username, password, settings: TokenSettings) -> AuthResult:
    email = clean_text(email)
    username = clean_text(username)
    password = password if isinstance(password, str) else ""
    if not email or not username or not password:
        raise ValidationError(SIGN_UP_REQUIRED)

    if _find_by_email(email) is not None:
        logger.info("Sign-up rejected: email already registered")
        raise Conflict(EMAIL_TAKEN)

    user = User(email=email, username=username)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent sign-up for the same email.
        db.session.rollback()
        raise Conflict(EMAIL_TAKEN)

    logger.info("User %s signed up", user.id)
    return AuthResult(token=issue_token(user.id, user.email, settings), user=user)


def sign_in(email, password, settings: TokenSettings) -> AuthResult:
    email = clean_text(email)
    password = password if isinstance(password, str) else ""
    if not email or not password:
        raise ValidationError(SIGN_IN_REQUIRED)

    user = _find_by_email(email)
    # Unknown email and wrong password are reported identically.
    if user is None or not user.check_password(password):
        logger.warning("Sign-in failed")
        raise Unauthorized()

    logger.info("User %s signed in", user.id)
    return AuthResult(token=issue_token(user.id, user.email, settings), user=user)
