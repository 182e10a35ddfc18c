"""Bearer token domain service."""

import logfire

from board.config import AuthSettings
from board.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the bearer tokens that identify the acting user."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Token signing settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Issue a token for a user who just registered or logged in."""
        token = create_token(user_id, username, self.auth_settings)
        logfire.info("Token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Return the claims of a valid token.

        Raises:
            JWTError: If token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Token rejected", reason=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the user ID of a valid token, or None.

        Missing, forged and expired tokens all give None.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
