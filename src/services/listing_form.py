# src/services/listing_form.py

"""Submission flow for new listings, independent of any widget."""

import logging
from collections.abc import Callable
from dataclasses import asdict
from enum import Enum
from typing import Any, Protocol

from src.filters.listing_validator import ListingValidator
from src.models.listing_draft import ListingDraft
from src.models.product import Condition
from src.services.auth_session import AuthSession
from src.services.remote_client import FetchError, RemoteDataClient

logger = logging.getLogger("quicksell.listing")


class Notifier(Protocol):
    """Signature shared with :meth:`textual.app.App.notify`."""

    def __call__(
        self,
        message: str,
        *,
        title: str = "",
        severity: Any = "information",
    ) -> None: ...


class FormState(str, Enum):
    """Where the form is in its submit cycle."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class ListingForm:
    """Collects a ListingDraft and submits it as a new product.

    Idle -> Submitting -> Idle.  A successful submit clears the draft and
    fires ``on_product_added`` once; a failed one keeps the draft so the
    seller can retry.
    """

    def __init__(
        self,
        client: RemoteDataClient,
        session: AuthSession,
        notify: Notifier,
        on_product_added: Callable[[], None] | None = None,
    ) -> None:
        self.client = client
        self.session = session
        self.notify = notify
        self.on_product_added = on_product_added
        self.draft = ListingDraft()
        self.state = FormState.IDLE

    def update(self, field_name: str, value: str) -> None:
        """Set one draft field from raw input."""
        if field_name == "condition":
            self.draft.condition = Condition(value)
            return
        if field_name not in asdict(self.draft):
            raise ValueError(f"Unknown listing field: {field_name}")
        setattr(self.draft, field_name, value)

    def reset(self) -> None:
        """Restore every field to its default."""
        self.draft = ListingDraft()

    @property
    def can_submit(self) -> bool:
        """True when idle and the draft passes validation."""
        return (
            self.state is FormState.IDLE
            and ListingValidator.is_submittable(self.draft)
        )

    def _insert_fields(self) -> dict[str, Any]:
        draft = self.draft
        return {
            "title": draft.title.strip(),
            "description": draft.description.strip(),
            "price": ListingValidator.parse_price(draft.price),
            "image_url": draft.image_url.strip() or None,
            "category": draft.category.strip() or None,
            "condition": draft.condition.value,
        }

    async def submit(self) -> bool:
        """Insert the draft as a product. Returns True on success."""
        if self.state is FormState.SUBMITTING:
            return False

        user = self.session.current_user()
        if user is None:
            logger.warning("Submit attempted without a signed-in user")
            self.notify(
                "Sign in to list an item",
                title="Error",
                severity="error",
            )
            return False

        problems = ListingValidator.validate(self.draft)
        if problems:
            self.notify(
                "; ".join(problems), title="Error", severity="error"
            )
            return False

        self.state = FormState.SUBMITTING
        try:
            await self.client.insert_product(self._insert_fields(), user.id)
        except FetchError as exc:
            logger.error("Listing submit failed: %s", exc.message)
            self.notify(exc.message, title="Error", severity="error")
            return False
        finally:
            self.state = FormState.IDLE

        self.notify(
            "Product added successfully",
            title="Success!",
            severity="information",
        )
        self.reset()
        if self.on_product_added is not None:
            self.on_product_added()
        return True
