"""Bearer token encoding and verification.

Tokens carry the user ID and the role the user had when the token was
issued. The role in a token is informational only; authorization always
uses the role stored on the user.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from blog.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "exp"]


class TokenPayload(BaseModel):
    """Decoded token claims."""

    user_id: str
    role: str = "user"
    exp: datetime


class JWTError(Exception):
    """A token could not be verified. The message is safe to return to clients."""

    pass


def create_token(user_id: str, role: str, settings: AuthSettings) -> str:
    """Sign a token for the user, valid for ``settings.jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the token's signature and expiry and decode its claims.

    Raises:
        JWTError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Invalid token")
