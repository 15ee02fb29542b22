"""Auth gate: turns a bearer credential into the acting user's session.

Everything behind the gate works with ``AuthSession.user_id`` only; raw
credentials never travel further than this module.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog
from fastapi import Header
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.passwords import verify_password
from storefront.identity.tokens import decode_token, issue_token
from storefront.identity.user.user import User
from storefront.shared.errors import Forbidden, Unauthorized

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AuthSession:
    """An authenticated caller: created at login, passed into every protected call."""

    user_id: str
    token: str
    expires_at: datetime


def start_session(user) -> AuthSession:
    token, expires_at = issue_token(user.id)
    return AuthSession(user_id=str(user.id), token=token, expires_at=expires_at)


def authenticate(email, password) -> AuthSession:
    """Check credentials and open a session; raise Unauthorized on mismatch."""
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("login_failed", email=email)
        raise Unauthorized("Invalid credentials")

    logger.info("login_succeeded", user_id=str(user.id))
    return start_session(user)


def bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.strip():
        raise Unauthorized("Access token required")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise Unauthorized("Invalid token")
    return token


def resolve_session(authorization: str | None) -> AuthSession:
    token = bearer_token(authorization)
    claims = decode_token(token)

    try:
        user = current_domain.repository_for(User).get(claims["sub"])
    except ObjectNotFoundError:
        raise Forbidden("User no longer exists") from None

    return AuthSession(
        user_id=str(user.id),
        token=token,
        expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
    )


async def require_session(authorization: str | None = Header(default=None)) -> AuthSession:
    """FastAPI dependency for protected endpoints."""
    return resolve_session(authorization)
