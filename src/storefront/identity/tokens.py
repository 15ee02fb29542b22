"""Bearer credentials: HS256 JWTs whose subject is the user id."""

from datetime import UTC, datetime, timedelta

import jwt

from storefront.config import get_jwt_expiry_days, get_jwt_secret
from storefront.shared.errors import Unauthorized

ALGORITHM = "HS256"


def issue_token(user_id, now: datetime | None = None) -> tuple[str, datetime]:
    """Sign a token for ``user_id``; returns the token and its expiry."""
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + timedelta(days=get_jwt_expiry_days())
    claims = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(claims, get_jwt_secret(), algorithm=ALGORITHM), expires_at


def decode_token(token: str) -> dict:
    """Verify signature and expiry; raise Unauthorized on any failure."""
    try:
        return jwt.decode(
            token,
            get_jwt_secret(),
            algorithms=[ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token has expired") from None
    except jwt.InvalidTokenError:
        raise Unauthorized("Invalid token") from None
