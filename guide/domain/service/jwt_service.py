"""JWT token domain service."""

import logfire

from guide.config import AuthSettings
from guide.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens are issued by the authentication collaborator; this service only
    turns a token back into the authenticated user's id.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, login: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            login: User login

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, login=login):
            token = create_token(user_id, login, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, login=login)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info(
                "JWT token verified", user_id=str(payload.user_id), login=payload.login
            )
            return payload
