"""Access token encoding and decoding (PyJWT).

Tokens carry the user id in the standard ``sub`` claim plus the user's
login. The authentication service that issues them shares the secret.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, Field, ValidationError

from guide.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    user_id: UUID = Field(alias="sub")
    login: str
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded, or has expired."""

    pass


def create_token(user_id: str, login: str, settings: AuthSettings) -> str:
    """Sign an access token for a user, valid for ``jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "login": login,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode an access token and check its signature and expiry.

    Raises:
        JWTError: If the token is malformed, forged, expired or its
            claims do not identify a user
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "login", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        # Signed, but the claims are not a user id and login
        raise JWTError("Malformed token claims") from e
