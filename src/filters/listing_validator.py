# src/filters/listing_validator.py

"""Listing validation: reject incomplete or malformed drafts before submit."""

import logging
import math
from urllib.parse import urlparse

from src.models.listing_draft import ListingDraft
from src.models.product import Condition

logger = logging.getLogger("quicksell.filters")


class ListingValidator:
    """Validate a ListingDraft and parse its price."""

    @staticmethod
    def parse_price(text: str) -> float | None:
        """Parse a price string into a finite, non-negative float.

        Returns ``None`` for empty, non-numeric, NaN/infinite or negative
        input.  Invalid prices are rejected, never coerced.
        """
        cleaned = text.strip()
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
        if not math.isfinite(value) or value < 0:
            return None
        return value

    @staticmethod
    def _is_http_url(text: str) -> bool:
        parsed = urlparse(text)
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    @staticmethod
    def validate(draft: ListingDraft) -> list[str]:
        """Return human-readable problems with *draft* (empty when valid)."""
        problems: list[str] = []

        if not draft.title.strip():
            problems.append("Title is required")
        if not draft.description.strip():
            problems.append("Description is required")

        if not draft.price.strip():
            problems.append("Price is required")
        elif ListingValidator.parse_price(draft.price) is None:
            problems.append("Price must be a non-negative number")

        image_url = draft.image_url.strip()
        if image_url and not ListingValidator._is_http_url(image_url):
            problems.append("Image URL must start with http:// or https://")

        if not isinstance(draft.condition, Condition):
            problems.append(f"Unknown condition: {draft.condition}")

        if problems:
            logger.debug("Draft rejected: %s", "; ".join(problems))
        return problems

    @staticmethod
    def is_submittable(draft: ListingDraft) -> bool:
        """True when *draft* has no validation problems."""
        return not ListingValidator.validate(draft)
