# src/models/listing_draft.py

"""Field values of a listing that has not been submitted yet."""

from dataclasses import dataclass

from src.models.product import Condition


@dataclass
class ListingDraft:
    """Raw form input for a new listing.

    Every field is kept exactly as typed; parsing and validation happen
    in :class:`~src.filters.listing_validator.ListingValidator`.
    """

    title: str = ""
    description: str = ""
    price: str = ""
    image_url: str = ""
    category: str = ""
    condition: Condition = Condition.NEW
