# src/services/remote_client.py

"""Async HTTP client for the hosted marketplace backend.

The backend exposes a PostgREST-style table API under ``/rest/v1`` and a
GoTrue-style auth API under ``/auth/v1``.  Every failure, whether a
transport error or an HTTP error status, is raised as :class:`FetchError`
carrying the backend's own message where it sent one.
"""

import json
import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.product import SellerProfile

logger = logging.getLogger("quicksell.api")


class FetchError(Exception):
    """A remote read or write failed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthError(FetchError):
    """Sign-in or sign-up was refused by the auth service."""


def _error_message(resp: curl_requests.Response) -> str:
    """Extract a human-readable message from an error response."""
    try:
        body: Any = json.loads(resp.text)
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            value = body.get(key)
            if value:
                return str(value)
    return f"HTTP {resp.status_code}"


class RemoteDataClient:
    """Table reads/inserts and auth calls against the hosted backend."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
    ) -> None:
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_URL).rstrip("/")
        self.api_key = (
            api_key if api_key is not None else self.settings.API_KEY
        )
        self.access_token: str | None = None
        self._http: curl_requests.AsyncSession | None = None

    def _session(self) -> curl_requests.AsyncSession:
        """Create the HTTP session on first use, inside the event loop."""
        if self._http is None:
            self._http = curl_requests.AsyncSession(
                impersonate=self.settings.IMPERSONATE_BROWSER,
            )
        return self._http

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._http is not None:
            await self._http.close()
            self._http = None

    def _headers(
        self,
        token: str | None = None,
        extra: dict[str, str] | None = None,
    ) -> dict[str, str]:
        bearer = token or self.access_token or self.api_key
        headers = {
            **self.settings.DEFAULT_HEADERS,
            "apikey": self.api_key,
            "Authorization": f"Bearer {bearer}",
        }
        if extra:
            headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
        token: str | None = None,
        extra_headers: dict[str, str] | None = None,
        error_cls: type[FetchError] = FetchError,
    ) -> Any:
        """Send one request and return the decoded JSON body (or None)."""
        url = f"{self.base_url}{path}"
        try:
            resp = await self._session().request(
                method,
                url,
                params=params,
                json=body,
                headers=self._headers(token, extra_headers),
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except curl_requests.RequestsError as exc:
            logger.error(
                "%s %s failed: %s", method, path, exc, exc_info=True
            )
            raise error_cls(str(exc)) from exc

        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.error(
                "%s %s returned HTTP %d: %s",
                method,
                path,
                resp.status_code,
                message,
            )
            raise error_cls(message, status_code=resp.status_code)

        logger.debug("%s %s -> HTTP %d", method, path, resp.status_code)
        if not resp.text.strip():
            return None
        try:
            return json.loads(resp.text)
        except ValueError as exc:
            raise error_cls(f"Malformed response from {path}") from exc

    # ==================== Table APIs ====================

    async def list_unsold_products(self) -> list[dict[str, Any]]:
        """Fetch every unsold product row, newest first."""
        rows = await self._request(
            "GET",
            f"/rest/v1/{self.settings.PRODUCTS_TABLE}",
            params={
                "select": "*",
                "is_sold": "eq.false",
                "order": "created_at.desc",
            },
        )
        result: list[dict[str, Any]] = rows or []
        logger.info("Fetched %d unsold products", len(result))
        return result

    async def get_profiles(
        self, seller_ids: list[str],
    ) -> dict[str, SellerProfile]:
        """Fetch the profiles of *seller_ids* in one request.

        Returns a mapping of seller id to profile; sellers without a
        profile are simply absent from the mapping.
        """
        if not seller_ids:
            return {}
        id_list = ",".join(f'"{sid}"' for sid in seller_ids)
        rows = await self._request(
            "GET",
            f"/rest/v1/{self.settings.PROFILES_TABLE}",
            params={
                "select": "id,username,full_name",
                "id": f"in.({id_list})",
            },
        )
        profiles = [SellerProfile.from_row(row) for row in rows or []]
        return {profile.id: profile for profile in profiles}

    async def get_profile(self, seller_id: str) -> SellerProfile | None:
        """Fetch a single seller profile; None when it does not exist."""
        profiles = await self.get_profiles([seller_id])
        return profiles.get(seller_id)

    async def insert_product(
        self,
        fields: dict[str, Any],
        seller_id: str,
    ) -> None:
        """Insert a new product row owned by *seller_id*."""
        row = {**fields, "seller_id": seller_id}
        await self._request(
            "POST",
            f"/rest/v1/{self.settings.PRODUCTS_TABLE}",
            body=row,
            extra_headers={"Prefer": "return=minimal"},
        )
        logger.info(
            "Inserted product '%s' for seller %s",
            fields.get("title"),
            seller_id,
        )

    # ==================== Auth APIs ====================

    async def sign_in_with_password(
        self, email: str, password: str,
    ) -> dict[str, Any]:
        """Exchange email/password for a session payload."""
        payload: dict[str, Any] = await self._request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "password"},
            body={"email": email, "password": password},
            error_cls=AuthError,
        )
        return payload

    async def sign_up(
        self, email: str, password: str,
    ) -> dict[str, Any]:
        """Register a new account.

        The payload holds a session when the backend does not require
        email confirmation, otherwise only the created user.
        """
        payload: dict[str, Any] = await self._request(
            "POST",
            "/auth/v1/signup",
            body={"email": email, "password": password},
            error_cls=AuthError,
        )
        return payload

    async def sign_out(self, token: str) -> None:
        """Revoke the session identified by *token*."""
        await self._request("POST", "/auth/v1/logout", token=token)
