"""Bearer token service."""

import logfire

from blog.config import AuthSettings
from blog.domain.value import UserRole
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the bearer tokens the API authenticates with."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, role: UserRole = UserRole.USER) -> str:
        """Issue a token for the user.

        Args:
            user_id: User the token identifies
            role: Role recorded in the token (informational)

        Returns:
            Signed token
        """
        token = create_token(user_id, role.value, self.auth_settings)
        logfire.info(
            "Token issued",
            user_id=user_id,
            expires_in_days=self.auth_settings.jwt_expiry_days,
        )
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token presented by a client.

        Raises:
            JWTError: If the token is expired or invalid
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Token rejected", reason=str(e))
            raise
