# src/services/auth_session.py

"""Session capability object: current user, sign-in and sign-out."""

import logging
from typing import Any

from src.models.user import SessionUser
from src.services.remote_client import AuthError, FetchError, RemoteDataClient

logger = logging.getLogger("quicksell.auth")


class AuthSession:
    """Holds the signed-in user and delegates auth to the backend.

    Passed explicitly to the screens and the listing form that need
    the current identity, so none of them reach for global state.
    """

    def __init__(self, client: RemoteDataClient) -> None:
        self.client = client
        self._user: SessionUser | None = None
        self._access_token: str | None = None

    def current_user(self) -> SessionUser | None:
        """Return the signed-in user, or None."""
        return self._user

    def _adopt(self, payload: dict[str, Any]) -> SessionUser | None:
        """Store the session carried by an auth payload, if any."""
        token = payload.get("access_token")
        user_data = payload.get("user")
        if not token or not isinstance(user_data, dict):
            return None
        self._user = SessionUser.from_payload(user_data)
        self._access_token = str(token)
        self.client.access_token = self._access_token
        logger.info("Signed in as %s", self._user.email or self._user.id)
        return self._user

    async def sign_in(self, email: str, password: str) -> SessionUser:
        """Sign in with email and password.

        Raises :class:`AuthError` when the credentials are refused.
        """
        payload = await self.client.sign_in_with_password(email, password)
        user = self._adopt(payload or {})
        if user is None:
            raise AuthError("Sign-in response did not include a session")
        return user

    async def sign_up(self, email: str, password: str) -> SessionUser | None:
        """Create an account.

        Returns the signed-in user, or None when the backend wants the
        address confirmed before a session is issued.
        """
        payload = await self.client.sign_up(email, password)
        user = self._adopt(payload or {})
        if user is None:
            logger.info("Sign-up for %s awaits email confirmation", email)
        return user

    async def sign_out(self) -> None:
        """End the session. Backend failures are logged, never raised."""
        token = self._access_token
        self._user = None
        self._access_token = None
        self.client.access_token = None
        if token is None:
            return
        try:
            await self.client.sign_out(token)
        except FetchError as exc:
            logger.warning("Sign-out request failed: %s", exc)
        logger.info("Signed out")
