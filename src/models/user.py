# src/models/user.py

"""Signed-in user identity returned by the auth service."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SessionUser:
    """The authenticated user of the current session."""

    id: str
    email: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SessionUser":
        """Build a SessionUser from an auth ``user`` object."""
        return cls(
            id=str(payload["id"]),
            email=str(payload.get("email") or ""),
        )
