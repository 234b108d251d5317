# tests/test_auth_session.py

"""Tests for AuthSession sign-in state handling."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from src.models.user import SessionUser
from src.services.auth_session import AuthSession
from src.services.remote_client import AuthError, FetchError

SESSION_PAYLOAD = {
    "access_token": "user-token",
    "refresh_token": "refresh",
    "user": {"id": "user-1", "email": "ann@example.test"},
}


def _client() -> MagicMock:
    client = MagicMock()
    client.access_token = None
    client.sign_in_with_password = AsyncMock(return_value=SESSION_PAYLOAD)
    client.sign_up = AsyncMock(return_value=SESSION_PAYLOAD)
    client.sign_out = AsyncMock(return_value=None)
    return client


class TestAuthSession(unittest.IsolatedAsyncioTestCase):
    """Sign-in, sign-up and sign-out."""

    async def test_starts_signed_out(self) -> None:
        """A fresh session has no user."""
        self.assertIsNone(AuthSession(_client()).current_user())

    async def test_sign_in_stores_user_and_token(self) -> None:
        """Signing in exposes the user and authorises the client."""
        client = _client()
        session = AuthSession(client)

        user = await session.sign_in("ann@example.test", "pw")

        self.assertEqual(
            user, SessionUser(id="user-1", email="ann@example.test")
        )
        self.assertEqual(session.current_user(), user)
        self.assertEqual(client.access_token, "user-token")

    async def test_sign_in_refused(self) -> None:
        """Refused credentials propagate and leave the session empty."""
        client = _client()
        client.sign_in_with_password.side_effect = AuthError(
            "Invalid login credentials", status_code=400
        )
        session = AuthSession(client)
        with self.assertRaises(AuthError):
            await session.sign_in("ann@example.test", "bad")
        self.assertIsNone(session.current_user())

    async def test_sign_in_without_session_payload(self) -> None:
        """A response lacking a token is treated as a failure."""
        client = _client()
        client.sign_in_with_password.return_value = {"user": {"id": "u"}}
        with self.assertRaises(AuthError):
            await AuthSession(client).sign_in("ann@example.test", "pw")

    async def test_sign_up_needing_confirmation(self) -> None:
        """Sign-up without a session returns None and stays signed out."""
        client = _client()
        client.sign_up.return_value = {"id": "user-1", "email": "a@b.test"}
        session = AuthSession(client)
        self.assertIsNone(await session.sign_up("a@b.test", "pw"))
        self.assertIsNone(session.current_user())

    async def test_sign_up_with_session(self) -> None:
        """Sign-up that returns a session signs the user in."""
        session = AuthSession(_client())
        user = await session.sign_up("ann@example.test", "pw")
        self.assertIsNotNone(user)
        self.assertEqual(session.current_user(), user)

    async def test_sign_out_revokes_token(self) -> None:
        """Sign-out calls the backend and clears local state."""
        client = _client()
        session = AuthSession(client)
        await session.sign_in("ann@example.test", "pw")

        await session.sign_out()

        client.sign_out.assert_awaited_once_with("user-token")
        self.assertIsNone(session.current_user())
        self.assertIsNone(client.access_token)

    async def test_sign_out_failure_is_silent(self) -> None:
        """Backend errors during sign-out are swallowed."""
        client = _client()
        client.sign_out.side_effect = FetchError("network down")
        session = AuthSession(client)
        await session.sign_in("ann@example.test", "pw")

        await session.sign_out()

        self.assertIsNone(session.current_user())

    async def test_sign_out_when_signed_out(self) -> None:
        """Signing out twice makes no backend call."""
        client = _client()
        await AuthSession(client).sign_out()
        client.sign_out.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
