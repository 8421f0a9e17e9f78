"""JWT token domain service."""

import logfire

from wire.config import AuthSettings
from wire.domain.model import Account
from wire.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account: Account) -> str:
        """Create a session token for an account.

        Args:
            account: Signed-in account

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_token",
            account_id=str(account.id),
            handle=account.handle.root,
        ):
            token = create_token(
                str(account.id),
                account.handle.root,
                account.access_level.value,
                self.auth_settings,
            )
            logfire.info("JWT token created", account_id=str(account.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
            logfire.info("JWT token verified", account_id=payload.account_id)
            return payload

    def get_account_id_from_token(self, token: str | None) -> str | None:
        """Extract the account ID from a token, or None if missing or invalid."""
        if not token:
            return None

        try:
            return self.verify_token(token).account_id
        except JWTError:
            return None
